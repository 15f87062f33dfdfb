"""ASGI middleware answering the configured health endpoint."""

from __future__ import annotations

from fastapi.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from service_health.presentation.health_renderer import HealthReportRenderer


class HealthCheckMiddleware:
    """
    Serve the health report on an exact path match.

    Every other request, and every non-HTTP scope, is handed to the wrapped
    application untouched.
    """

    def __init__(self, app: ASGIApp, renderer: HealthReportRenderer) -> None:
        self.app = app
        self.renderer = renderer

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self.renderer.matches(scope["path"]):
            await self.app(scope, receive, send)
            return

        result = await self.renderer.render()
        response = Response(
            content=result.content,
            status_code=result.status_code,
            media_type="application/json",
            headers={"Cache-Control": "no-store"},
        )
        await response(scope, receive, send)
