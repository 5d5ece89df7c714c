from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ICON = "info"


class Severity(str, Enum):
    PRIMARY = "primary"
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"
    NEUTRAL = "neutral"


class NotificationRequest(BaseModel):
    """A single toast display request. Built per call and never stored."""
    title: str
    description: str = ""
    icon: str = DEFAULT_ICON
    severity: Severity = Field(default=Severity.PRIMARY, validate_default=True)

    model_config = ConfigDict(
        use_enum_values=True,        # severity is delivered as its plain string
        frozen=True,
        extra="forbid",
    )
