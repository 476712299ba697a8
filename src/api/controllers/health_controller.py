"""Application health check controller."""

import logging

from classy_fastapi.decorators import get

from application.settings import Settings

from .controller_base import ApiControllerBase

log = logging.getLogger(__name__)


class HealthController(ApiControllerBase):
    """Controller for application health checks."""

    def __init__(self, settings: Settings) -> None:
        self.name = "Health"
        self.settings = settings
        super().__init__(prefix="", tags=["Health"])

    @get("/health")
    async def ping(self) -> dict:
        """Health check endpoint to verify the application is online."""
        return {"status": "healthy", "service": self.settings.service_name, "version": self.settings.app_version}
