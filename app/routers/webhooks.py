from fastapi import APIRouter, Depends, Header, HTTPException, Response
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.location_event import EventKind, LocationEvent, LocationPayload, WebhookMetadata
from app.services.location_reconciler import LocationReconciler

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/locations", status_code=204)
def receive_location(
    payload: LocationPayload,
    x_event: EventKind = Header(...),
    x_model: str = Header("location"),
    x_delivery: str | None = Header(None),
    db: Session = Depends(get_db),
):
    if x_model != "location":
        raise HTTPException(status_code=422, detail=f"Nepodporovaný model webhooku: {x_model}")
    metadata = WebhookMetadata(event=x_event, model=x_model, delivery_id=x_delivery)
    LocationReconciler(db).apply(LocationEvent.from_delivery(payload, metadata))
    return Response(status_code=204)
