# app/models/member.py

from typing import Literal
from pydantic import BaseModel, Field, field_validator

MemberStatus = Literal["Online", "Offline"]


class MemberRecord(BaseModel):
    """A guild member as read from the authoritative roster."""

    name: str = Field(min_length=1)
    status: MemberStatus
    roles: list[str] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value):
        if isinstance(value, str):
            return value.strip().capitalize()
        return value

    @field_validator("roles", mode="before")
    @classmethod
    def _split_roles(cls, value):
        # Roster files carry roles as a single "A;B;C" field
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(";")
        return [role.strip() for role in value if role and role.strip()]

    @property
    def is_online(self) -> bool:
        return self.status == "Online"

    class Config:
        frozen = True
