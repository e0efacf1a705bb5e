"""HTTP API shell.

Only a liveness route exists. The app configures CORS for the web client
origins; FastAPI parses JSON and form bodies on its own.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from rich.console import Console

from .. import __version__
from ..config import Settings, load_settings

LIVENESS_MESSAGE = "app is running"

_console = Console()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Runtime settings (loaded from the environment if None)

    Returns:
        Configured FastAPI app
    """
    settings = settings or load_settings()

    app = FastAPI(title="FloatChat Backend", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    def liveness() -> str:
        return LIVENESS_MESSAGE

    return app


def run_server(settings: Settings | None = None, console: Console | None = None) -> None:
    """Serve the API with uvicorn until interrupted."""
    import uvicorn

    settings = settings or load_settings()
    con = console or _console
    app = create_app(settings)

    con.print(f"[green]{LIVENESS_MESSAGE} on port {settings.port}[/green]")
    con.print(f"[dim]Allowed origins: {', '.join(settings.allowed_origins)}[/dim]")
    uvicorn.run(app, host=settings.host, port=settings.port)
