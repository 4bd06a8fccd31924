from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class SubscribeIn(BaseModel):
    """Raw signup payload. Values are coerced and validated by the service, not here."""

    model_config = ConfigDict(extra="ignore")

    email: Optional[Any] = None
    source: Optional[Any] = None


class SignupOutcome(str, Enum):
    CREATED = "created"
    DUPLICATE = "duplicate"


class SignupResult(BaseModel):
    outcome: SignupOutcome
    email: str
    source: str

    @property
    def response_status(self) -> str:
        return "ok" if self.outcome is SignupOutcome.CREATED else "exists"
