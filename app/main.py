from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import os
import uvicorn

from . import routers
from .database import check_db_connection, create_supabase_client, init_db
from .utils.constants import AppConstants

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Wedding Planner API",
    description="Guest list, CSV import and public RSVP for weddings",
    version="1.0.0",
)

cors_origins = os.getenv("CORS_ORIGINS")
app.add_middleware(
    CORSMiddleware,
    allow_origins=(
        [origin.strip() for origin in cors_origins.split(",") if origin.strip()]
        if cors_origins
        else AppConstants.DEFAULT_CORS_ORIGINS
    ),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Create tables and the Supabase client once per process"""
    logger.info("Starting Wedding Planner API...")
    init_db()
    app.state.supabase = create_supabase_client()


# Error bodies are always {"message": ...}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(content),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"message": "Invalid request", "error": exc.errors()}),
    )


# Include routers
app.include_router(routers.auth.router, prefix="/api")
app.include_router(routers.weddings.router, prefix="/api")
app.include_router(routers.guests.router, prefix="/api")
app.include_router(routers.categories.router, prefix="/api")
app.include_router(routers.rsvp.router, prefix="/api")


@app.get("/")
async def root():
    return {"message": "Welcome to the Wedding Planner API", "status": "running"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "wedding-planner-api",
        "version": "1.0.0",
        "database": check_db_connection(),
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000, reload=True)
