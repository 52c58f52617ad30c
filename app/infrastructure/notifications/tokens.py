"""Device token classification."""

from typing import Optional

from infrastructure.notifications.models import TokenKind

# Expo push tokens look like ExponentPushToken[xxxxxxxx]; newer SDKs also
# issue ExpoPushToken[xxxxxxxx].
RELAY_TOKEN_PREFIXES = ("ExponentPushToken", "ExpoPushToken")


def classify_token(token: Optional[str]) -> TokenKind:
    """Resolve which delivery channel a device token belongs to.

    Args:
        token: Raw device token from the user directory, possibly missing

    Returns:
        TokenKind.RELAY for Expo tokens, TokenKind.PROVIDER for any other
        non-blank token, TokenKind.NONE otherwise
    """
    if token is None or not token.strip():
        return TokenKind.NONE
    if token.strip().startswith(RELAY_TOKEN_PREFIXES):
        return TokenKind.RELAY
    return TokenKind.PROVIDER
