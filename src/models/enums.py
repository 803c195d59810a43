"""
Enum definitions for the User Directory Sync Service
"""

from enum import Enum

class SyncOperation(str, Enum):
    LOAD = "load"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

class SyncOutcome(str, Enum):
    """
    Outcome of a directory operation as reported to the user.

    - SYNCED: the remote call completed with a 2xx status
    - LOCAL_ONLY: the remote call failed, only the in-memory list changed
    - FAILED: the operation could not complete (load only)
    """
    SYNCED = "synced"
    LOCAL_ONLY = "local_only"
    FAILED = "failed"
