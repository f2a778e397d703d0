"""Seed script — naplní adresář kampusů."""
import os
import sys

# Ensure we're in the project root
sys.path.insert(0, os.path.dirname(__file__))

from app.database import Base, engine, SessionLocal
from app.models.campus import Campus


CAMPUSES = [
    # (externí ID, název, časová zóna, země, město)
    (1, "Paris", "Europe/Paris", "France", "Paris"),
    (9, "Lyon", "Europe/Paris", "France", "Lyon"),
    (12, "Heilbronn", "Europe/Berlin", "Germany", "Heilbronn"),
    (21, "Praha", "Europe/Prague", "Czech Republic", "Prague"),
    (41, "Lausanne", "Europe/Zurich", "Switzerland", "Lausanne"),
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    existing_ids = {c.external_id for c in db.query(Campus).all()}
    for external_id, name, tz, country, city in CAMPUSES:
        if external_id not in existing_ids:
            db.add(Campus(external_id=external_id, name=name, time_zone=tz, country=country, city=city))

    db.commit()
    db.close()
    print("✅ Seed dokončen!")


if __name__ == "__main__":
    seed()
