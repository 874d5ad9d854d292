from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, List


@dataclass(frozen=True)
class ApiFunction:
    """A layout function published to the CLI and HTTP server."""

    name: str
    func: Callable[..., Any]
    description: str
    category: str

    def describe(self) -> Dict[str, Any]:
        parameters = inspect.signature(self.func).parameters.values()
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "parameters": {param.name: str(param.annotation) for param in parameters},
            "required": [param.name for param in parameters if param.default is inspect.Parameter.empty],
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(name: str, *, description: str, category: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(name=name, func=func, description=description, category=category)
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def get_api_function(name: str) -> ApiFunction:
    try:
        return REGISTRY[name]
    except KeyError:
        raise KeyError(f"API function '{name}' is not registered.") from None


def call_api(name: str, **kwargs: Any) -> Any:
    return get_api_function(name).func(**kwargs)
