"""
User Directory Sync Service
Form-driven CRUD against a remote user directory with local fallback
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, DIRECTORY_API_URL, DIRECTORY_API_TIMEOUT, LOAD_ON_STARTUP
from services.directory_sync import init_directory_sync, close_directory_sync
from api.routes import health, users
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    await init_directory_sync(DIRECTORY_API_URL, timeout=DIRECTORY_API_TIMEOUT, load=LOAD_ON_STARTUP)
    yield
    await close_directory_sync()

# FastAPI app initialization
app = FastAPI(
    title="User Directory Sync",
    description="User directory form backend with validation and optimistic local fallback",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=ALLOWED_ORIGINS != ["*"],
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Setup centralized error handling
setup_error_handling(app)

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
