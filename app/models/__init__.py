from app.models.campus import Campus
from app.models.user import User
from app.models.location import Location

__all__ = ["Campus", "User", "Location"]
