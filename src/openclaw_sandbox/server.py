# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

"""
FastAPI server exposing the code runner to the dashboard.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from openclaw_sandbox import __version__
from openclaw_sandbox.config import SandboxConfig
from openclaw_sandbox.exceptions import SandboxValidationError
from openclaw_sandbox.models import ExecutionRequest, HealthResponse, LanguagesResponse, RunResponse
from openclaw_sandbox.sandbox import SandboxAsync
from openclaw_sandbox.utils.logger import logger


def create_app(sandbox: SandboxAsync | None = None) -> FastAPI:
    """Build the application around a sandbox instance.

    Args:
        sandbox: The sandbox to serve; a default one is created when omitted.
    """
    service = sandbox or SandboxAsync()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await service.start()
        try:
            yield
        finally:
            await service.terminate()

    app = FastAPI(
        title="OpenClaw Sandbox",
        description="Runs code snippets for the OpenClaw dashboard",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.sandbox = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    @app.get("/api/run/languages", response_model=LanguagesResponse)
    async def list_languages() -> LanguagesResponse:
        return LanguagesResponse(
            languages=service.supported_languages(),
            aliases=service.registry.aliases(),
        )

    @app.post("/api/run", response_model=RunResponse)
    async def run_code(request: ExecutionRequest) -> RunResponse | JSONResponse:
        """
        Execute a snippet and return its merged output.
        A program that fails still returns 200 with success=false.
        """
        try:
            result = await service.execute(request.code, request.language)
        except SandboxValidationError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        except Exception as e:
            logger.exception(f"Run failed: {e}")
            return JSONResponse(status_code=500, content={"error": str(e)})
        return RunResponse.from_result(result)

    return app


def serve() -> None:
    """Entry point for the HTTP server."""
    config = SandboxConfig()
    app = create_app(SandboxAsync(config))
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":  # pragma: no cover
    serve()
