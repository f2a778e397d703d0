import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from app.errors import NotFoundError, PresenceError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.error(f"{exc} ({request.url.path}, delivery={request.headers.get('x-delivery')})")
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(PresenceError)
    async def presence_error_handler(request: Request, exc: PresenceError):
        logger.error(f"{exc} ({request.url.path})")
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    # 5xx vede odesílatele k opakovanému doručení
    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Chyba databáze při zpracování {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Chyba databáze"})
