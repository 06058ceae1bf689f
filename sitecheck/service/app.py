"""FastAPI application exposing sitecheck operations."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..models import SiteReport
from ..orchestrator import CleanupOutcome, SiteChecker


class CheckRequest(BaseModel):
    path: str
    only: Optional[List[str]] = None


class FindingModel(BaseModel):
    category: str
    status: str
    message: str
    paths: List[str] = []
    remedy: Optional[str] = None


class SectionModel(BaseModel):
    name: str
    title: str
    findings: List[FindingModel]


class ReportResponse(BaseModel):
    root: str
    todo_count: int
    sections: List[SectionModel]


class CleanupRequest(BaseModel):
    path: str
    preview: bool = True


class DeletionModel(BaseModel):
    path: str
    deleted: bool
    error: Optional[str] = None


class CleanupResponse(BaseModel):
    root: str
    preview: bool
    duplicates: List[str]
    results: List[DeletionModel] = []


class HealthResponse(BaseModel):
    status: str


def _default_checker() -> SiteChecker:
    return SiteChecker()


def _report_response(report: SiteReport) -> ReportResponse:
    return ReportResponse.model_validate(report.to_dict())


def _cleanup_response(outcome: CleanupOutcome) -> CleanupResponse:
    return CleanupResponse(
        root=str(outcome.root),
        preview=outcome.preview,
        duplicates=[item.path for item in outcome.duplicates],
        results=[
            DeletionModel(path=result.path, deleted=result.deleted, error=result.error)
            for result in outcome.results
        ],
    )


async def _in_executor(func: Callable[[], Any]) -> Any:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func)


def create_app(
    checker_factory: Callable[[], SiteChecker] = _default_checker,
) -> FastAPI:
    """Create the FastAPI application exposing site checks."""

    app = FastAPI(title="sitecheck", version="0.1.0")

    async def get_checker() -> SiteChecker:
        return checker_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/check", response_model=ReportResponse)
    async def check_site(
        payload: CheckRequest,
        checker: SiteChecker = Depends(get_checker),
    ) -> ReportResponse:
        report = await _in_executor(lambda: checker.run_check(payload.path, only=payload.only))
        return _report_response(report)

    @app.post("/clean-duplicates", response_model=CleanupResponse)
    async def clean_duplicates(
        payload: CleanupRequest,
        checker: SiteChecker = Depends(get_checker),
    ) -> CleanupResponse:
        outcome = await _in_executor(
            lambda: checker.clean_duplicates(payload.path, preview=payload.preview)
        )
        return _cleanup_response(outcome)

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(_: Any, exc: RuntimeError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
