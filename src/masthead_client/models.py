from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserRole(str, Enum):
    OWNER = "OWNER"
    USER = "USER"


class DataAssetType(str, Enum):
    DATASET = "DATASET"
    TABLE = "TABLE"


class AlertType(str, Enum):
    REGULAR = "REGULAR"
    CRITICAL = "CRITICAL"


class WireModel(BaseModel):
    """
    Base for payloads exchanged with the client API.
    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Server-computed fields never sent on create/update.
    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = frozenset()

    def to_payload(self) -> Dict[str, Any]:
        payload = self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude=set(self.READ_ONLY_FIELDS),
        )
        if payload.get("uuid") == "":
            payload.pop("uuid")
        return payload


# --- Users ---


class User(WireModel):
    email: str
    role: UserRole


# --- Data domains ---


class SlackChannel(BaseModel):
    name: Optional[str] = Field(default=None, alias="channelName")
    id: Optional[str] = Field(default=None, alias="channelId")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Domain(WireModel):
    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = frozenset(
        {"slack_channel", "created_at", "updated_at"}
    )

    uuid: str = ""
    name: str
    email: str
    # write-only; the server answers with slack_channel instead
    slack_channel_name: Optional[str] = Field(default=None, alias="slackChannelName")
    slack_channel: Optional[SlackChannel] = Field(default=None, alias="slackChannel")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


# --- Data products ---


class DataAsset(BaseModel):
    type: DataAssetType
    uuid: str = ""
    project: str = ""
    dataset: str = ""
    # Only meaningful for TABLE assets; the server decides whether it is required.
    table: Optional[str] = None
    alert_type: Optional[AlertType] = Field(default=None, alias="alertType")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class DataProduct(WireModel):
    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = frozenset(
        {"domain", "created_at", "updated_at"}
    )

    uuid: str = ""
    name: str
    description: Optional[str] = None
    data_domain_uuid: Optional[str] = Field(default=None, alias="dataDomainUuid")
    domain: Optional[Domain] = None
    data_assets: List[DataAsset] = Field(default_factory=list, alias="dataAssets")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @field_validator("data_assets", mode="before")
    @classmethod
    def _null_assets(cls, raw: Any) -> Any:
        return [] if raw is None else raw

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        # Sent even when empty; an omitted description leaves the stored one.
        payload["description"] = self.description or ""
        return payload


__all__ = [
    "UserRole",
    "DataAssetType",
    "AlertType",
    "WireModel",
    "User",
    "SlackChannel",
    "Domain",
    "DataAsset",
    "DataProduct",
]
