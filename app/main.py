# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import activity, auth, availability, feedback, session, skill, users
from app.config import settings
from app.database import create_db_and_tables
from app.exceptions import (
    BusinessLogicError,
    DuplicateRequestError,
    InvalidStatusTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from app.services.meeting_links import load_meeting_links

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and load the meeting link pool once per process."""
    logger.info("Application startup (env=%s)", settings.APP_ENV)
    create_db_and_tables()
    app.state.meeting_links = load_meeting_links(
        settings.MEETING_LINKS_FILE,
        settings.MEETING_LINK_PREFIX,
    )
    yield
    logger.info("Application shutdown")


# Initialize FastAPI app
app = FastAPI(
    title="MentorLink API",
    description="Mentor/mentee session booking.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ======================
# ERROR HANDLERS
# ======================

STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DuplicateRequestError, status.HTTP_400_BAD_REQUEST),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidStatusTransitionError, status.HTTP_409_CONFLICT),
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"message": "Validation error", "errors": exc.errors()}),
    )


@app.exception_handler(BusinessLogicError)
async def business_logic_handler(request: Request, exc: BusinessLogicError):
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            body = {"message": exc.message}
            if isinstance(exc, ValidationError):
                body["errors"] = exc.errors
            return JSONResponse(status_code=status_code, content=jsonable_encoder(body))

    logger.error("Unmapped business error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


# API routers
app.include_router(auth.router)          # /api/register, /api/login, /api/user
app.include_router(users.router)         # /api/profile, /api/mentors
app.include_router(availability.router)  # /api/availability
app.include_router(session.router)       # /api/sessions, /api/session-requests
app.include_router(feedback.router)      # /api/feedback
app.include_router(skill.router)         # /api/skills
app.include_router(activity.router)      # /api/activities


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "MentorLink API is running",
        "version": "1.0.0",
    }
