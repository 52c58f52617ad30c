"""Infrastructure modules for the chat relay.

Centralized infrastructure components:
- configuration: Settings management (Settings and domain settings)
- clients: External service clients (FirebaseAppManager)
- logging: Structured logging (configure_logging, get_module_logger)
- models: API response models
- notifications: Push dispatch (PushDispatcher, ExpoChannel, FcmChannel)
- operations: Operation results and error classification
- services: Dependency injection services (SettingsDep, ReplyServiceDep, get_settings)
"""

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
