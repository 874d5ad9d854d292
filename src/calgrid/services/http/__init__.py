"""HTTP services for calgrid."""

from .server import app, health, invoke_api_function, list_api_functions, run_local_server

__all__ = [
    "app",
    "health",
    "invoke_api_function",
    "list_api_functions",
    "run_local_server",
]
