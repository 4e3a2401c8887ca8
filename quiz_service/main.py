# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quiz_service import models  # noqa: F401  registers tables on Base.metadata
from quiz_service.core.config import settings
from quiz_service.core.database import Base, engine
from quiz_service.routes.admin import router as admin_router
from quiz_service.routes.questions import router as questions_router
from quiz_service.routes.quiz import router as quiz_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    message = first.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {message}" if loc else message


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed requests are plain 400s with a readable reason"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _describe_validation_error(exc)},
    )


@app.get("/")
def read_root():
    return {"message": f"{settings.PROJECT_NAME} is running"}


app.include_router(quiz_router)
app.include_router(admin_router)
app.include_router(questions_router)
