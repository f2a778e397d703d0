from app.schemas.location_event import (
    EventKind, LocationUser, LocationPayload, WebhookMetadata, LocationEvent,
)

__all__ = [
    "EventKind", "LocationUser", "LocationPayload", "WebhookMetadata", "LocationEvent",
]
