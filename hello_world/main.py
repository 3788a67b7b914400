"""FastAPI app entrypoint."""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from hello_world import __version__
from hello_world.api.routers import root
from hello_world.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and register routers. Opens no sockets."""
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.APP_NAME,
        description="Responds with a greeting on the root path",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    application.include_router(root.router)

    return application


# Create FastAPI app
app = create_app()


class Server(uvicorn.Server):
    """uvicorn server that announces itself once the listener is bound."""

    async def startup(self, sockets=None) -> None:
        # uvicorn exits from startup() when the bind fails
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"listening on port {self.config.port}.")


def configure_logging(settings: Settings) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=settings.log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_server(settings: Settings) -> Server:
    """Create a server for a fresh app built from ``settings``."""
    config = uvicorn.Config(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.log_level()
    )
    return Server(config)


def main() -> None:
    """Serve the app on the configured host and port."""
    settings = get_settings()
    configure_logging(settings)

    build_server(settings).run()


if __name__ == "__main__":
    main()
