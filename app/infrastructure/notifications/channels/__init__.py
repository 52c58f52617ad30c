"""Push channel implementations."""

from infrastructure.notifications.channels.base import PushChannel
from infrastructure.notifications.channels.expo import ExpoChannel, truncate_body
from infrastructure.notifications.channels.fcm import FcmChannel

__all__ = [
    "PushChannel",
    "ExpoChannel",
    "FcmChannel",
    "truncate_body",
]
