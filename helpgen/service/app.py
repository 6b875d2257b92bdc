"""FastAPI application entrypoint for helpgen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..discovery import find_cmdlet
from ..formatters import get_formatter
from ..generator import HelpGenerator
from ..models import UnresolvableCommandError


class HelpRequest(BaseModel):
    root: str
    keys: str
    syntax: str = "unix"


class HelpResponse(BaseModel):
    command: str
    keys: str
    lines: List[str]


class HealthResponse(BaseModel):
    status: str


def _default_generator(syntax: str) -> HelpGenerator:
    return HelpGenerator(get_formatter(syntax))


def create_app(
    generator_factory: Callable[[str], HelpGenerator] = _default_generator,
) -> FastAPI:
    """Create the FastAPI application exposing help generation."""

    app = FastAPI(title="helpgen service", version="1.0.0")

    async def get_factory() -> Callable[[str], HelpGenerator]:
        return generator_factory

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/help", response_model=HelpResponse)
    async def command_help(
        payload: HelpRequest,
        factory: Callable[[str], HelpGenerator] = Depends(get_factory),
    ) -> HelpResponse:
        generator = factory(payload.syntax)

        def _run() -> HelpResponse:
            cmdlet = find_cmdlet(payload.root, payload.keys)
            return HelpResponse(
                command=cmdlet.command_name,
                keys=cmdlet.keys,
                lines=generator.generate(cmdlet),
            )

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, _run)

    @app.exception_handler(UnresolvableCommandError)
    async def unresolvable_handler(
        _: Any, exc: UnresolvableCommandError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
