"""Deterministic layout functions exposed over HTTP and the CLI."""

from __future__ import annotations

from . import endpoints as _endpoints  # noqa: F401 - registers the layout functions
from .registry import ApiFunction, call_api, get_api_function, get_api_functions, register_api

__all__ = ["ApiFunction", "call_api", "get_api_function", "get_api_functions", "register_api"]
