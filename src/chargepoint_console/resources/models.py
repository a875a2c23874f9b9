"""Resource models, camelCase on the wire."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chargepoint_console.session.roles import ApiRole

__all__ = [
    "BusinessLog",
    "ChargePoint",
    "ChargePointNotification",
    "ChargePointStatus",
    "Configuration",
    "Firmware",
    "LogCategory",
    "StatusProcess",
    "Step",
    "TechnicalLog",
    "TypeAllowed",
    "User",
]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Step(StrEnum):
    """Stage a charge point is being brought through."""

    FIRMWARE = "FIRMWARE"
    CONFIGURATION = "CONFIGURATION"


class StatusProcess(StrEnum):
    """Progress of the current step."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    FINISHED = "FINISHED"
    FAILED = "FAILED"


class LogCategory(StrEnum):
    """Category of a business log entry."""

    LOGIN = "LOGIN"
    STATUS = "STATUS"
    FIRM = "FIRM"
    CONFIG = "CONFIG"


class TypeAllowed(_WireModel):
    """Charge point model a firmware can be installed on."""

    id: int
    constructor: str
    type: str


class Firmware(_WireModel):
    """Firmware release."""

    id: int
    url: str
    version: str
    constructor: str
    types_allowed: list[TypeAllowed] = Field(default_factory=list)


class Configuration(_WireModel):
    """Named configuration pushed to charge points."""

    id: int
    name: str
    description: str = ""
    last_edit: datetime | None = None
    configuration: str = ""
    firmware: Firmware | None = None


class ChargePointStatus(_WireModel):
    """Connection and process status of a charge point."""

    error: str | None = None
    state: bool = Field(description="True when the charge point is connected.")
    step: Step
    status: StatusProcess
    last_update: datetime | None = None


class ChargePoint(_WireModel):
    """Charging station managed by the backend."""

    id: int
    serial_number_chargepoint: str
    type: str
    constructor: str
    client_id: str
    configuration: Configuration | None = None
    status: ChargePointStatus | None = None


class ChargePointNotification(_WireModel):
    """Status update pushed on the notification channel."""

    id: int
    status: ChargePointStatus


class User(_WireModel):
    """Console user account."""

    id: int
    email: str
    first_name: str
    last_name: str
    role: ApiRole


class BusinessLog(_WireModel):
    """Business event log entry."""

    id: int
    date: datetime
    user: User | None = None
    chargepoint: ChargePoint | None = None
    category: LogCategory
    level: str
    complete_log: str


class TechnicalLog(_WireModel):
    """Technical log entry of a backend component."""

    id: int
    date: datetime
    component: str
    level: str
    complete_log: str
