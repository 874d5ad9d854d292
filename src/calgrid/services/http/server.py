from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...api import get_api_function, get_api_functions
from ...bootstrap import configure_logging
from ...config import get_settings


configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="calgrid layout API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


@app.get("/health")
async def health() -> JSONResponse:
    return JSONResponse({"status": "ok", "app": get_settings().ui.app_name})


@app.get("/api/functions")
async def list_api_functions() -> JSONResponse:
    return JSONResponse({"functions": [func.describe() for func in get_api_functions()]})


@app.post("/api/functions/{function_name}")
async def invoke_api_function(function_name: str, request: ApiCallRequest) -> JSONResponse:
    try:
        api_function = get_api_function(function_name)
    except KeyError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    try:
        result = api_function.func(**request.arguments)
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("API function %s rejected its arguments: %s", function_name, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("API function %s failed", function_name)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return JSONResponse({"name": function_name, "result": result})


def run_local_server(host: str | None = None, port: int | None = None) -> None:
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    settings = get_settings().server
    config = Config()
    config.bind = [f"{host or settings.host}:{port or settings.port}"]
    logger.info("Serving layout API on %s", config.bind[0])
    asyncio.run(serve(app, config))
