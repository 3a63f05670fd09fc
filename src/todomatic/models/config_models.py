"""Configuration models for TodoMatic.

Each section configures one external collaborator; the CLI reads and writes
values by dotted key (e.g. ``location.permission``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

PermissionPolicy = Literal["ask", "always", "never"]


class StorageConfig(BaseModel):
    """Durable task mirror configuration."""

    path: str | None = Field(
        default=None, description="JSON store file (defaults to the user data dir)"
    )
    key: str = Field(default="@todomatic_tasks", description="Key of the task blob")

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("key cannot be empty")
        return v.strip()


class LocationConfig(BaseModel):
    """Location provider configuration."""

    permission: PermissionPolicy = Field(default="ask")
    position_url: str = Field(default="https://ipapi.co/json/")
    reverse_geocode_url: str = Field(
        default="https://nominatim.openstreetmap.org/reverse"
    )
    timeout: float = Field(default=10.0, gt=0)
    user_agent: str = Field(default="todomatic/0.3 (+https://github.com/todomatic)")


class CameraConfig(BaseModel):
    """Photo capture configuration."""

    permission: PermissionPolicy = Field(default="ask")
    media_dir: str | None = Field(
        default=None, description="Where captured photos are copied"
    )


class ContactsConfig(BaseModel):
    """Contacts directory configuration."""

    permission: PermissionPolicy = Field(default="ask")
    path: str | None = Field(default=None, description="JSON contacts file")


class MessagingConfig(BaseModel):
    """SMS dispatch configuration.

    ``command`` is an argv template; ``{recipient}`` and ``{body}`` are
    substituted per recipient.
    """

    command: list[str] = Field(default_factory=list)


class MapsConfig(BaseModel):
    """Map launcher configuration."""

    platform: str | None = Field(
        default=None, description="Override the detected platform (darwin, ios, linux, ...)"
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main TodoMatic configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    location: LocationConfig = Field(default_factory=LocationConfig)
    camera: CameraConfig = Field(default_factory=CameraConfig)
    contacts: ContactsConfig = Field(default_factory=ContactsConfig)
    messaging: MessagingConfig = Field(default_factory=MessagingConfig)
    maps: MapsConfig = Field(default_factory=MapsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
