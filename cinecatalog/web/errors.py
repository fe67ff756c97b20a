"""
Traduction des erreurs du domaine en reponses HTTP.

- NotFoundError -> 404 {"detail": ...}
- ValidationError et erreurs de parsing de la requete -> 400 {"errors": {champ: [messages]}}
- AssetStoreError -> 500 {"detail": ...}

Le format {"errors": ...} est celui que le front d'administration
aplatit en lignes "champ: message".
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from ..core.exceptions import AssetStoreError, NotFoundError, ValidationError

# Segments de localisation pydantic qui ne designent pas un champ
_LOCATION_ROOTS = frozenset({"body", "query", "path", "header", "form"})


def _field_of(location: tuple) -> str:
    parts = [str(part) for part in location if part not in _LOCATION_ROOTS]
    return ".".join(parts) or "request"


def errors_from_request_validation(exc: RequestValidationError) -> dict[str, list[str]]:
    """Regroupe les erreurs de validation FastAPI par champ."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_of(tuple(error.get("loc", ()))), []).append(error["msg"])
    return errors


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=status.HTTP_404_NOT_FOUND)


async def _validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.debug(f"Requete invalide sur {request.url.path}: {exc}")
    return JSONResponse({"errors": exc.errors}, status_code=status.HTTP_400_BAD_REQUEST)


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        {"errors": errors_from_request_validation(exc)},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _asset_store_handler(request: Request, exc: AssetStoreError) -> JSONResponse:
    logger.error(f"Echec du stockage sur {request.url.path}: {exc}")
    return JSONResponse({"detail": str(exc)}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Installe les handlers d'erreurs sur l'application."""
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(ValidationError, _validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(AssetStoreError, _asset_store_handler)
