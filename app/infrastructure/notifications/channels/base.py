"""Push channel abstract base class.

All channel implementations (Expo, FCM) must implement this interface.
"""

from abc import ABC, abstractmethod

from infrastructure.notifications.models import PushNotification, TokenKind
from infrastructure.operations import OperationResult


class PushChannel(ABC):
    """Abstract base class for push delivery channels.

    Each channel handles delivery through a specific provider:
    - ExpoChannel: Expo push relay for Expo tokens
    - FcmChannel: Firebase Cloud Messaging for native registration tokens

    The dispatcher routes on ``token_kind`` so feature code never inspects
    token strings.
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Channel identifier used for logging ("expo", "fcm")."""
        pass

    @property
    @abstractmethod
    def token_kind(self) -> TokenKind:
        """Token variant this channel delivers to."""
        pass

    @abstractmethod
    def send(self, notification: PushNotification) -> OperationResult:
        """Send the notification to its device token.

        Must handle provider errors and return a failed OperationResult
        rather than raising.

        Args:
            notification: Notification intent for one device

        Returns:
            OperationResult with a DeliveryOutcome in ``data`` on success
        """
        pass
