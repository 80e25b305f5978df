"""Application records used for match analytics."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from .opportunity import Opportunity
from .profile import RECORD_CONFIG, Employee

ACCEPTED_STATUS = "accepted"


class Application(BaseModel):
    """Historical application linking an employee to an opportunity."""

    id: str | None = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    employee: Employee | None = None
    opportunity: Opportunity | None = None
    status: str = "submitted"
    is_active: bool = True

    model_config = RECORD_CONFIG

    @field_validator("employee", "opportunity", mode="before")
    @classmethod
    def expand_reference(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"id": value}
        return value

    @property
    def is_accepted(self) -> bool:
        return self.status == ACCEPTED_STATUS
