# backend/atlas/main.py
import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from atlas.core.config import settings
from atlas.core.exceptions import AtlasError
from atlas.core.init_db import init_db
from atlas.api import (
    algorithms,
    classifications,
    compute_resources,
    discussions,
    implementations,
    platforms,
    publications,
)
from atlas.schemas.common import ErrorResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Atlas Quantum Algorithm Catalog API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    await init_db()


@app.exception_handler(AtlasError)
async def atlas_error_handler(request: Request, exc: AtlasError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(code=exc.code, message=exc.message, detail=exc.detail).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{key: value for key, value in error.items() if key != "ctx"} for error in exc.errors()]
    logger.warning(f"{request.method} {request.url.path} failed validation: {len(errors)} errors")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            code="VALIDATION_ERROR",
            message="Request validation failed",
            detail=jsonable_encoder(errors),
        ).model_dump(),
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} violated a database constraint: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content=ErrorResponse(
            code="REFERENCE_CONSTRAINT_VIOLATION",
            message="The operation conflicts with existing data",
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def general_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(code="INTERNAL_ERROR", message="An unexpected error occurred").model_dump(),
    )


app.include_router(algorithms.router, prefix=settings.API_PREFIX)
app.include_router(implementations.nested_router, prefix=settings.API_PREFIX)
app.include_router(implementations.router, prefix=settings.API_PREFIX)
app.include_router(compute_resources.router, prefix=settings.API_PREFIX)
app.include_router(compute_resources.property_types_router, prefix=settings.API_PREFIX)
app.include_router(platforms.software_platforms_router, prefix=settings.API_PREFIX)
app.include_router(platforms.cloud_services_router, prefix=settings.API_PREFIX)
app.include_router(discussions.router, prefix=settings.API_PREFIX)
app.include_router(classifications.tags_router, prefix=settings.API_PREFIX)
app.include_router(classifications.problem_types_router, prefix=settings.API_PREFIX)
app.include_router(classifications.application_areas_router, prefix=settings.API_PREFIX)
app.include_router(classifications.learning_methods_router, prefix=settings.API_PREFIX)
app.include_router(classifications.pattern_relation_types_router, prefix=settings.API_PREFIX)
app.include_router(classifications.algorithm_relation_types_router, prefix=settings.API_PREFIX)
app.include_router(publications.router, prefix=settings.API_PREFIX)
app.include_router(publications.tosca_router, prefix=settings.API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
