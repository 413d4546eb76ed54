"""Unhandled-error middleware.

Turns any exception that escapes the routes into the 500 error envelope
while still inside the request: the failure is logged once with the request
id bound, and the response passes back out through the CORS and request-id
middleware like any other. Raw ASGI.

Exceptions raised after the response has started cannot be replaced and
are re-raised to the server.
"""

from fastapi import Request

from app.core.exception_handlers import unhandled_exception_response
from app.middleware.request_id import ASGIApp, Message, Receive, Scope, Send


class UnhandledErrorMiddleware:
    """Answer unclassified failures with the 500 envelope. Add it innermost."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_tracking)
        except Exception as exc:
            if response_started:
                raise
            response = unhandled_exception_response(Request(scope), exc)
            await response(scope, receive, send)
