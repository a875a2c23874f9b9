"""Resource module: console resources as generic backend collections."""

from .exceptions import (
    OperationNotSupportedError,
    ResourceNotFoundError,
    UnknownResourceError,
)
from .models import (
    BusinessLog,
    ChargePoint,
    ChargePointNotification,
    ChargePointStatus,
    Configuration,
    Firmware,
    LogCategory,
    StatusProcess,
    Step,
    TechnicalLog,
    TypeAllowed,
    User,
)
from .registry import RESOURCES, ResourceDefinition, get_resource

__all__ = [
    "RESOURCES",
    "BusinessLog",
    "ChargePoint",
    "ChargePointNotification",
    "ChargePointStatus",
    "Configuration",
    "Firmware",
    "LogCategory",
    "OperationNotSupportedError",
    "ResourceDefinition",
    "ResourceNotFoundError",
    "StatusProcess",
    "Step",
    "TechnicalLog",
    "TypeAllowed",
    "UnknownResourceError",
    "User",
    "get_resource",
]
