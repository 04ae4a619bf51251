"""Closed error taxonomy for the webhook API and its JSON rendering.

Every failure the API can report is one of the ``ApiError`` subclasses below.
Each one knows its HTTP status and the fields that are safe to show a client.
Inner causes (``InternalError``, ``MalformedHeader``, ``JsonError``) are kept
on the exception for server-side logging and never serialized.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

try:
    HTTP_422 = status.HTTP_422_UNPROCESSABLE_CONTENT
except AttributeError:  # starlette < 0.48
    HTTP_422 = status.HTTP_422_UNPROCESSABLE_ENTITY


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    @property
    def kind(self) -> str:
        return type(self).__name__

    def public_fields(self) -> dict[str, Any]:
        return {}


class InternalError(ApiError):
    """Broken configuration or crypto setup on our side."""

    def __init__(self, cause: BaseException | str):
        self.cause = cause
        super().__init__(str(cause))


class ResourceNotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(uri)

    def public_fields(self) -> dict[str, Any]:
        return {"uri": self.uri}


class MethodNotAllowed(ApiError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, method: str):
        self.method = method
        super().__init__(method)

    def public_fields(self) -> dict[str, Any]:
        return {"method": self.method}


class MissingHeader(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def public_fields(self) -> dict[str, Any]:
        return {"key": self.key}


class MalformedHeader(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, key: str, cause: BaseException | str):
        self.key = key
        self.cause = cause
        super().__init__(key)

    def public_fields(self) -> dict[str, Any]:
        return {"key": self.key}


class UnsupportedMediaType(ApiError):
    def __init__(
        self, content_type: str, status_code: int = status.HTTP_400_BAD_REQUEST
    ):
        self.content_type = content_type
        self.status_code = status_code
        super().__init__(content_type)

    def public_fields(self) -> dict[str, Any]:
        return {"content_type": self.content_type}


class UnsupportedUserAgent(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, user_agent: str):
        self.user_agent = user_agent
        super().__init__(user_agent)

    def public_fields(self) -> dict[str, Any]:
        return {"user_agent": self.user_agent}


class MismatchedSignature(ApiError):
    """Carries only the signature the caller sent, never the expected one."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, signature: str):
        self.signature = signature
        super().__init__(signature)

    def public_fields(self) -> dict[str, Any]:
        return {"signature": self.signature}


class UnsupportedWebhookEvent(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, event: str):
        self.event = event
        super().__init__(event)

    def public_fields(self) -> dict[str, Any]:
        return {"event": self.event}


class JsonError(ApiError):
    """Body did not decode into the schema selected for its event type.

    Syntax errors map to 400, well-formed JSON of the wrong shape to 422.
    """

    def __init__(self, cause: ValidationError):
        self.cause = cause
        self.errors = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in cause.errors(include_url=False, include_input=False)
        ]
        if any(err["type"] == "json_invalid" for err in self.errors):
            self.status_code = status.HTTP_400_BAD_REQUEST
        else:
            self.status_code = HTTP_422
        super().__init__(str(cause))

    def public_fields(self) -> dict[str, Any]:
        return {"errors": self.errors}


def to_response(error: ApiError) -> tuple[int, dict[str, Any]]:
    return error.status_code, {"type": error.kind, **error.public_fields()}


def render(error: ApiError) -> JSONResponse:
    status_code, body = to_response(error)
    return JSONResponse(status_code=status_code, content=body)


def register_exception_handlers(app: FastAPI, api_prefix: str) -> None:
    """Route every error, including routing misses under ``api_prefix``, through ``render``."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if isinstance(exc, InternalError):
            logger.error(
                f"Internal error on {request.method} {request.url.path}: {exc.cause!r}",
                exc_info=exc.cause if isinstance(exc.cause, BaseException) else None,
            )
        else:
            logger.warning(
                f"Rejected {request.method} {request.url.path}: {exc.kind}"
            )
        return render(exc)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
            exc_info=exc,
        )
        return render(InternalError(exc))

    @app.exception_handler(StarletteHTTPException)
    async def routing_error_handler(request: Request, exc: StarletteHTTPException):
        path = request.url.path
        if path == api_prefix or path.startswith(api_prefix + "/"):
            if exc.status_code == status.HTTP_404_NOT_FOUND:
                uri = path
                if request.url.query:
                    uri = f"{path}?{request.url.query}"
                return render(ResourceNotFound(uri))
            if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
                return render(MethodNotAllowed(request.method))
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return Response(status_code=exc.status_code)
        return await http_exception_handler(request, exc)
