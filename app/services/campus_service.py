import logging
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.errors import CampusNotFoundError
from app.models.campus import Campus

logger = logging.getLogger(__name__)


def find_campus_by_external_id(db: Session, external_id: int) -> Campus:
    campus = db.scalar(select(Campus).where(Campus.external_id == external_id))
    if not campus:
        logger.error("Kampus %d nenalezen", external_id)
        raise CampusNotFoundError(external_id)
    return campus
