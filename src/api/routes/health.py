"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter, Depends
from services.directory_sync import DirectorySyncController, get_directory_sync

router = APIRouter()

@router.get("/")
async def health_check(controller: DirectorySyncController = Depends(get_directory_sync)):
    """
    Health check - reports healthy whether or not the directory is reachable

    The service keeps working against its local list when the directory is
    down, so directory availability is not part of health.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "directory_url": controller.client.base_url,
        "users": len(controller.store)
    }
