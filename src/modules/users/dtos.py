"""User DTOs.  The password never leaves the model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.users.models import User


class UserSummaryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    phone: str = ""
    birth_date: Optional[date] = None

    @classmethod
    def from_entity(cls, user: User) -> UserSummaryDTO:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            birth_date=user.birth_date,
        )
