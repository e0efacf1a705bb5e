"""HTTP API shell for FloatChat."""

from .app import LIVENESS_MESSAGE, create_app, run_server

__all__ = [
    "LIVENESS_MESSAGE",
    "create_app",
    "run_server",
]
