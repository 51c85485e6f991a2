"""FastAPI layer that exposes keyword suggestions."""
from __future__ import annotations

from fastapi import FastAPI, Query as FastAPIQuery, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from domain.errors import KeywordServiceError
from infrastructure.config import Container, ServiceConfig, build_default_container
from ui.logging_utils import setup_logging


class KeywordPayload(BaseModel):
    keyword: str
    confidence: float
    uri: str


class KeywordsResponse(BaseModel):
    success: bool = True
    keywords: list[KeywordPayload]


class ErrorResponse(BaseModel):
    error: str


def create_app(container: Container | None = None) -> FastAPI:
    container = container or build_default_container()
    app = FastAPI(title="KeywordSuggest API")
    app.state.container = container

    @app.exception_handler(KeywordServiceError)
    async def keyword_error_handler(request: Request, exc: KeywordServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        fields = [str(error["loc"][-1]) for error in exc.errors() if error.get("loc")]
        message = f"Invalid value for '{fields[0]}'." if fields else "Invalid request."
        return JSONResponse(status_code=400, content={"error": message})

    @app.get(
        "/keywords",
        response_model=KeywordsResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def keywords_endpoint(
        text: str = FastAPIQuery("", description="Content to extract keywords from"),
        cache: bool = FastAPIQuery(False, description="Serve a cached result when available"),
    ) -> KeywordsResponse:
        annotations = container.keyword_service.get_keywords(text, use_cache=cache)
        return KeywordsResponse(
            keywords=[KeywordPayload(**annotation.to_dict()) for annotation in annotations],
        )

    return app


config = ServiceConfig.from_env()
setup_logging(config)
app = create_app(build_default_container(config))
