import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from account_service.config import settings
from account_service.database import create_tables
from account_service.routers.auth import router as auth_router
from account_service.routers.users import router as users_router
from account_service.utils.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        await create_tables()
        logger.info("Database ready")
    except (SQLAlchemyError, OSError):
        # Keep serving; requests report StorageUnavailable until the database is back.
        logger.exception("Error connecting to the database")
    yield


app = FastAPI(
    title="Account Service API",
    description="Sign-up and login with hashed passwords",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(users_router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Server is running"
