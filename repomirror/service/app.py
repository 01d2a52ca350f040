"""FastAPI application entrypoint for repomirror service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..engine import AnalysisEngine
from ..errors import FetchFailed, InvalidInput, NotFound, RateLimited
from ..github import GitHubClient
from ..models import AnalysisResult
from ..pipeline import evaluate_repository
from ..report import result_to_dict


class AnalyzeRequest(BaseModel):
    url: str
    token: Optional[str] = None


class DimensionResponse(BaseModel):
    title: str
    score: int
    max_score: int
    feedback: List[str]


class RoadmapItemResponse(BaseModel):
    priority: str
    title: str
    description: str
    action_items: List[str]


class AnalyzeResponse(BaseModel):
    repository: str
    overall_score: int
    max_score: int
    percentage: float
    skill_level: str
    tier: str
    scores: Dict[str, DimensionResponse]
    summary: str
    roadmap: List[RoadmapItemResponse]
    analyzed_at: str


class HealthResponse(BaseModel):
    status: str


def _default_client(token: Optional[str]) -> GitHubClient:
    return GitHubClient(token=token)


def create_app(
    engine_factory: Callable[[], AnalysisEngine] = AnalysisEngine,
    client_factory: Callable[[Optional[str]], GitHubClient] = _default_client,
) -> FastAPI:
    """Create the FastAPI application exposing repository analysis."""

    app = FastAPI(title="RepoMirror Service", version=__version__)

    async def get_engine() -> AnalysisEngine:
        return engine_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze_repo(
        payload: AnalyzeRequest,
        engine: AnalysisEngine = Depends(get_engine),
    ) -> AnalyzeResponse:
        def _run_analysis() -> AnalysisResult:
            return evaluate_repository(
                payload.url,
                client=client_factory(payload.token),
                engine=engine,
            )

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run_analysis)
        return AnalyzeResponse(**result_to_dict(result))

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(_: Any, exc: InvalidInput) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(NotFound)
    async def not_found_handler(_: Any, exc: NotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(RateLimited)
    async def rate_limited_handler(_: Any, exc: RateLimited) -> JSONResponse:
        return JSONResponse(status_code=429, content={"detail": str(exc)})

    @app.exception_handler(FetchFailed)
    async def fetch_failed_handler(_: Any, exc: FetchFailed) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
