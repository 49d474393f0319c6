from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.common import settings
from dnarepair import __version__
from dnarepair.common import add_log_file, connect, disconnect, logger
from dnarepair.errors import DNARepairError

from .routers import (
    auth,
    blogs,
    general,
    protein_modifications,
    protein_positions,
    proteins,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    add_log_file(settings.log_file)
    connect(host=settings.mongodb_url, db=settings.mongodb_db)
    yield
    disconnect()


app = FastAPI(
    title="DNA Repair Knowledge Base",
    description="""
An API for the DNA repair knowledge base: proteins of the homologous recombination (HR) and
non-homologous end joining (NHEJ) pathways, their interactions and modifications, saved pathway
diagram layouts, and the blog.

Read routes are public. Mutations need `Authorization: Bearer <token>` obtained from `/api/auth/login`.
""",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(DNARepairError)
def handle_dnarepair_error(request: Request, exc: DNARepairError):
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(exc.to_dict()),
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "error": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(StarletteHTTPException)
def handle_http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


app.include_router(general.router, tags=["General"])
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(proteins.router, prefix="/api/proteins", tags=["Proteins"])
app.include_router(protein_positions.router, prefix="/api/protein-positions", tags=["Protein positions"])
app.include_router(protein_modifications.router, prefix="/api/protein-modifications", tags=["Protein modifications"])
app.include_router(blogs.router, prefix="/api/blogs", tags=["Blog"])
