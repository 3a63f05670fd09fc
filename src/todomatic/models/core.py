"""Task data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class StatusFilter(str, Enum):
    """Which tasks a list view shows."""

    ALL = "ALL"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"


class PermissionStatus(str, Enum):
    """Outcome of a permission prompt."""

    GRANTED = "granted"
    DENIED = "denied"


class SendStatus(str, Enum):
    """Outcome of handing a message to the messaging provider."""

    SENT = "sent"
    CANCELLED = "cancelled"


class CapabilityLevel(str, Enum):
    """How complete a capability's behaviour is."""

    FULL = "full"
    PARTIAL = "partial"


class Coordinates(BaseModel):
    """A geographic point.

    Attributes:
        latitude: Latitude in degrees (-90 to 90)
        longitude: Longitude in degrees (-180 to 180)
    """

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class AddressComponents(BaseModel):
    """Parts of a reverse-geocoded address. Any part may be missing."""

    name: str | None = None
    street: str | None = None
    district: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None


class Task(BaseModel):
    """Task model representing the sole persisted entity.

    Serialized with the camelCase keys of the durable record
    (``createdAt``, ``updatedAt``, ``formattedAddress``).

    Attributes:
        id: Opaque unique identifier, immutable
        title: Non-empty, trimmed title
        description: Optional detailed description
        completed: Completion status
        created_at: Creation time in epoch milliseconds, immutable
        updated_at: Last mutation time in epoch milliseconds
        location: Optional captured coordinates
        formatted_address: Reverse-geocoded address, if geocoding succeeded
        image: Optional URI of externally-owned media
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    title: str
    description: str | None = None
    completed: bool = False
    created_at: int = Field(alias="createdAt", ge=0)
    updated_at: int = Field(alias="updatedAt", ge=0)
    location: Coordinates | None = None
    formatted_address: str | None = Field(default=None, alias="formattedAddress")
    image: str | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Titles are stored trimmed and must not be blank."""
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v

    @model_validator(mode="after")
    def check_timestamps(self) -> Task:
        if self.updated_at < self.created_at:
            raise ValueError("updatedAt must not precede createdAt")
        return self

    def to_record(self) -> dict:
        """Serialize to the durable record shape."""
        return self.model_dump(by_alias=True, mode="json")


class TaskDraft(BaseModel):
    """In-progress create/edit form state. Never persisted.

    Attributes:
        title: Title as typed (validated only on save)
        description: Description as typed
        location: Attached coordinates
        formatted_address: Address resolved for ``location``
        image: Attached media URI
        edit_target: Task being edited, ``None`` when creating
        generation: Token identifying this draft; stale workflow results
            carrying an older token are discarded
    """

    title: str = ""
    description: str = ""
    location: Coordinates | None = None
    formatted_address: str | None = None
    image: str | None = None
    edit_target: Task | None = None
    generation: int = 0

    @property
    def is_editing(self) -> bool:
        return self.edit_target is not None


class LocationFix(BaseModel):
    """Result of a completed location workflow.

    ``formatted_address`` is ``None`` when reverse geocoding failed or found
    nothing; ``geocode_error`` then explains why, if it failed.
    """

    coordinates: Coordinates
    formatted_address: str | None = None
    geocode_error: str | None = None


class Contact(BaseModel):
    """A contacts-directory entry."""

    id: str
    name: str
    phone_numbers: list[str] = Field(default_factory=list)


class ContactPick(BaseModel):
    """Result of the contact picker.

    The picker resolves to the first contact in the directory rather than a
    user choice, so results are marked ``PARTIAL``.
    """

    contact: Contact
    level: CapabilityLevel = CapabilityLevel.PARTIAL

    @property
    def partial(self) -> bool:
        return self.level is CapabilityLevel.PARTIAL
