"""
Request id bookkeeping.

Every HTTP request gets an id, taken from the ``X-REQUEST-ID`` header when the caller sends one. While the request is
served the id lives in a context variable, so that logging can pick it up, and it is set on the response, error
responses included.
"""

import contextvars
import logging
import uuid
from typing import Callable

from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

X_REQUEST_ID = "X-REQUEST-ID"
request_id = contextvars.ContextVar("request_id", default="")

logger = logging.getLogger(__name__)


def get_request_id() -> str:
    """
    Get the request_id valid for the entire request, or an empty string outside of one.
    """
    return request_id.get()


def extract_request_id_from(extract_request_fn: Callable[[str], str | None]) -> str:
    """
    Extracts the request id from the incoming request by using the given function, or generates a new one

    :param extract_request_fn: request id extract function, accepting as argument the request id name.
        Must return the request id string value, or None
    """
    return extract_request_fn(X_REQUEST_ID) or _generate_request_id()


def _generate_request_id() -> str:
    rid = str(uuid.uuid4())
    logger.debug("Generated new request_id %s", rid)

    return rid


class RequestIdMiddleware:
    """
    ASGI middleware binding a request id to each HTTP request.

    Unhandled errors from the wrapped app are answered here with a plain 500, so that the error response carries the
    id as well, and then re-raised for the server to log.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        rid = extract_request_id_from(Headers(scope=scope).get)
        token = request_id.set(rid)
        response_started = False

        async def send_with_request_id(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                MutableHeaders(scope=message)[X_REQUEST_ID] = rid
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        except Exception:
            logger.exception("Request %s failed", rid)
            if not response_started:
                response = PlainTextResponse("Internal Server Error", status_code=500)
                await response(scope, receive, send_with_request_id)
            raise
        finally:
            request_id.reset(token)
