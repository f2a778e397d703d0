"""Doménové výjimky pro zpracování location webhooků.

NotFound chyby nesou externí identifikátor, aby je šlo zalogovat bez dalšího
kontextu. Chyby úložiště (SQLAlchemyError) se nebalí a propadají beze změny.
"""


class PresenceError(Exception):
    """Základ všech doménových chyb."""


class NotFoundError(PresenceError):
    entity = "record"

    def __init__(self, external_id: int):
        super().__init__(f"{self.entity} with external id {external_id} not found")
        self.external_id = external_id


class CampusNotFoundError(NotFoundError):
    entity = "Campus"


class UserNotFoundError(NotFoundError):
    entity = "User"


class UnsupportedEventError(PresenceError):
    def __init__(self, kind: str):
        super().__init__(f"Unsupported location event: {kind!r}")
        self.kind = kind
