import enum
from datetime import datetime
from pydantic import BaseModel, Field


class EventKind(str, enum.Enum):
    create = "create"
    close = "close"
    destroy = "destroy"


class LocationUser(BaseModel):
    id: int
    login: str = Field(..., min_length=1, max_length=64)
    url: str | None = None


class LocationPayload(BaseModel):
    """Tělo location webhooku, názvy polí odpovídají odesílateli."""

    id: int
    begin_at: datetime
    end_at: datetime | None = None
    primary: bool = True
    host: str = Field(..., max_length=255)
    campus_id: int
    user: LocationUser


class WebhookMetadata(BaseModel):
    event: EventKind
    model: str = "location"
    delivery_id: str | None = None


class LocationEvent(BaseModel):
    kind: EventKind
    payload: LocationPayload
    metadata: WebhookMetadata | None = None

    @classmethod
    def from_delivery(cls, payload: LocationPayload, metadata: WebhookMetadata) -> "LocationEvent":
        return cls(kind=metadata.event, payload=payload, metadata=metadata)
