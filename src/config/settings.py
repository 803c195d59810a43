"""
Configuration settings for the User Directory Sync Service
"""

import os
import logging

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or QA
PORT = int(os.getenv("PORT", 8080))

# Remote user directory
DIRECTORY_API_URL = os.getenv("DIRECTORY_API_URL", "https://jsonplaceholder.typicode.com/users").rstrip("/")

# No timeout unless one is configured explicitly
_timeout = os.getenv("DIRECTORY_API_TIMEOUT")
DIRECTORY_API_TIMEOUT = float(_timeout) if _timeout else None

# Populate the user list when the application starts
LOAD_ON_STARTUP = os.getenv("LOAD_ON_STARTUP", "true").lower() in ("1", "true", "yes")

logger.info(f"Environment: {ENV}")
logger.info(f"Directory API: {DIRECTORY_API_URL} (timeout: {DIRECTORY_API_TIMEOUT or 'none'})")

# Validate required environment variables
if not DIRECTORY_API_URL.startswith(("http://", "https://")):
    raise ValueError("DIRECTORY_API_URL must be an http:// or https:// URL")

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]
