"""
Reconciler location webhooků: aplikuje create/close/destroy na tabulku
locations a udržuje ukazatele current_location / last_location na uživateli.

Každá vícekroková změna běží v jedné transakci; chyba uvnitř ji celou vrátí.
Chybějící řádky při close/destroy nejsou chyba (opakované nebo
přeházené doručení je běžné), neznámý kampus při create ano.
"""
import logging
from sqlalchemy.orm import Session

from app.config import settings
from app.database import transaction
from app.errors import UnsupportedEventError
from app.schemas.location_event import EventKind, LocationEvent, LocationPayload
import app.services.campus_service as campus_svc
import app.services.location_service as location_svc
import app.services.user_service as user_svc

logger = logging.getLogger(__name__)


class LocationReconciler:
    def __init__(
        self,
        db: Session,
        anonymized_prefix: str | None = None,
        strict_unlink: bool | None = None,
    ):
        self.db = db
        self.anonymized_prefix = (
            settings.ANONYMIZED_LOGIN_PREFIX if anonymized_prefix is None else anonymized_prefix
        )
        self.strict_unlink = settings.STRICT_UNLINK if strict_unlink is None else strict_unlink

    def apply(self, event: LocationEvent) -> None:
        handlers = {
            EventKind.create: self.create,
            EventKind.close: self.close,
            EventKind.destroy: self.destroy,
        }
        handler = handlers.get(event.kind)
        if handler is None:
            raise UnsupportedEventError(str(event.kind))

        delivery_id = event.metadata.delivery_id if event.metadata else None
        logger.debug(
            "Location %s: external_id=%d user=%s delivery=%s",
            event.kind.value, event.payload.id, event.payload.user.login, delivery_id,
        )
        handler(event.payload)

    def is_anonymized(self, loc: LocationPayload) -> bool:
        return bool(self.anonymized_prefix) and loc.user.login.startswith(self.anonymized_prefix)

    def create(self, loc: LocationPayload) -> None:
        campus = campus_svc.find_campus_by_external_id(self.db, loc.campus_id)

        if self.is_anonymized(loc):
            return

        user = user_svc.find_or_create_user_from_location(self.db, loc)

        # Pozdě doručený create už ukončené session neobnovuje current pointer
        is_open = loc.end_at is None
        with transaction(self.db):
            previous = location_svc.get_location_by_external_id(self.db, loc.id)
            if previous is not None and previous.user_id != user.id:
                # Location mění vlastníka, původní vlastník na ni nesmí dál ukazovat
                location_svc.clear_current_location(
                    self.db, previous.user_id, location_id=previous.id
                )
            location_id = location_svc.upsert_location(self.db, loc, campus, user)
            location_svc.set_user_pointers(
                self.db, user.id, location_id, campus.id, current=is_open
            )
            if not is_open:
                location_svc.clear_current_location(self.db, user.id, location_id=location_id)

        logger.info("Location %d: %s na %s (kampus %s)", loc.id, user.login, loc.host, campus.name)

    def close(self, loc: LocationPayload) -> None:
        with transaction(self.db):
            if not location_svc.close_location(self.db, loc):
                logger.info("Close pro neznámou location %d, pouze odpojuji uživatele", loc.id)
            self.unlink(loc)

    def destroy(self, loc: LocationPayload) -> None:
        with transaction(self.db):
            if not location_svc.delete_location(self.db, loc.id):
                logger.info("Destroy pro neznámou location %d, pouze odpojuji uživatele", loc.id)
            self.unlink(loc)

    def unlink(self, loc: LocationPayload) -> None:
        user = user_svc.get_user_by_external_id(self.db, loc.user.id)
        if not user:
            return

        if self.strict_unlink:
            current = user.current_location
            if current is not None and current.external_id != loc.id and current.is_open:
                logger.info(
                    "Uživatel %s má novější otevřenou location %d, ponechávám",
                    user.login, current.external_id,
                )
                return

        location_svc.clear_current_location(self.db, user.id)
