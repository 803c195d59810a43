"""
Directory sync controller - reconciles form input, the in-memory user list
and the remote directory API

Every data operation attempts the remote call first and then applies the
mutation locally whatever the remote outcome was. Remote failures are logged
and reported through the status message; they never block the local change.
"""

import asyncio
import logging
from typing import List, Optional

from pydantic import ValidationError

from models.enums import SyncOperation, SyncOutcome
from models.user import SubmitResponse, SyncResult, User, UserData, UserForm
from services.directory_client import DirectoryAPIError, DirectoryClient
from services.table_renderer import TableRenderer, UserListRenderer
from services.user_store import UserStore
from utils.validators import validate_user_data

logger = logging.getLogger(__name__)

MESSAGES = {
    (SyncOperation.LOAD, SyncOutcome.SYNCED): "Users loaded",
    (SyncOperation.LOAD, SyncOutcome.FAILED): "Failed to load users",
    (SyncOperation.CREATE, SyncOutcome.SYNCED): "User added successfully",
    (SyncOperation.CREATE, SyncOutcome.LOCAL_ONLY): "User added locally (API failed)",
    (SyncOperation.UPDATE, SyncOutcome.SYNCED): "User updated successfully",
    (SyncOperation.UPDATE, SyncOutcome.LOCAL_ONLY): "User updated locally (API failed)",
    (SyncOperation.DELETE, SyncOutcome.SYNCED): "User deleted successfully",
    (SyncOperation.DELETE, SyncOutcome.LOCAL_ONLY): "User deleted locally (API failed)",
}

class DirectorySyncController:
    """Owns the user list and applies create/update/delete with local fallback"""

    def __init__(self, client: DirectoryClient, store: Optional[UserStore] = None, renderer: Optional[UserListRenderer] = None):
        self.client = client
        self.store = store if store is not None else UserStore()
        self.renderer = renderer if renderer is not None else TableRenderer()
        # One user action at a time
        self._lock = asyncio.Lock()

    @property
    def users(self) -> List[User]:
        return self.store.all()

    async def load(self) -> SyncResult:
        """
        Replace the local list with the directory's full list

        On any failure the list is left empty and a FAILED result is reported.
        """
        async with self._lock:
            try:
                records = await self.client.list_users()
                users = [User.model_validate(record) for record in records]
            except (DirectoryAPIError, ValidationError) as e:
                logger.error(f"Error fetching users: {e}")
                self.store.clear()
                return self._finish(SyncOperation.LOAD, SyncOutcome.FAILED, error=str(e))

            self.store.replace_all(users)
            logger.info(f"Loaded {len(self.store)} users from directory")
            return self._finish(SyncOperation.LOAD, SyncOutcome.SYNCED)

    async def create(self, data: UserData) -> SyncResult:
        """
        Create a user remotely and append it locally

        Args:
            data: Validated field values

        Returns:
            SyncResult with the appended user. If the directory call fails the
            user gets a local id of max(existing ids) + 1.
        """
        async with self._lock:
            try:
                created = await self.client.create_user(data)
                user = User.model_validate({**data.model_dump(), **created})
            except (DirectoryAPIError, ValidationError) as e:
                logger.error(f"Error adding user: {e}")
                user = User.from_data(self.store.next_id(), data)
                logger.warning(f"Assigned local id {user.id} to unsynced user {user.username}")
                self.store.append(user)
                return self._finish(SyncOperation.CREATE, SyncOutcome.LOCAL_ONLY, user=user, error=str(e))

            if user.id in self.store:
                local_id = self.store.next_id()
                logger.warning(f"Directory returned id {user.id} which is already listed; storing as {local_id}")
                user = user.model_copy(update={"id": local_id})

            self.store.append(user)
            return self._finish(SyncOperation.CREATE, SyncOutcome.SYNCED, user=user)

    async def update(self, user_id, data: UserData) -> SyncResult:
        """
        Update a user remotely, then replace the local record by id

        The local record is replaced whatever the HTTP status or transport
        outcome. An id that is not in the list leaves the list unchanged.
        """
        user_id = int(user_id)
        async with self._lock:
            outcome, error = SyncOutcome.SYNCED, None
            try:
                status_code = await self.client.update_user(user_id, data)
                logger.info(f"Update response status: {status_code}")
            except DirectoryAPIError as e:
                logger.error(f"Error updating user {user_id}: {e}")
                outcome, error = SyncOutcome.LOCAL_ONLY, str(e)

            user = User.from_data(user_id, data)
            if not self.store.replace(user_id, user):
                logger.warning(f"User {user_id} not in local list, nothing to replace")
                user = None

            return self._finish(SyncOperation.UPDATE, outcome, user=user, error=error)

    async def delete(self, user_id) -> SyncResult:
        """Delete a user remotely, then remove it locally whatever the outcome"""
        user_id = int(user_id)
        async with self._lock:
            outcome, error = SyncOutcome.SYNCED, None
            try:
                await self.client.delete_user(user_id)
            except DirectoryAPIError as e:
                logger.error(f"Error deleting user {user_id}: {e}")
                outcome, error = SyncOutcome.LOCAL_ONLY, str(e)

            removed = self.store.get(user_id)
            self.store.remove(user_id)
            return self._finish(SyncOperation.DELETE, outcome, user=removed, error=error)

    def edit(self, user_id) -> Optional[UserForm]:
        """Form prefilled from the stored user, in edit mode; None if unknown"""
        user = self.store.get(int(user_id))
        if user is None:
            return None
        return UserForm(user_id=user.id, **user.to_data().model_dump())

    async def submit(self, form: UserForm) -> SubmitResponse:
        """
        Validate a submitted form and dispatch it

        All five validators run. If any reports an error nothing is sent and
        nothing changes; otherwise the form updates the user it is editing or
        creates a new one, and a blank form is returned.
        """
        data = form.to_data()
        errors = validate_user_data(data)
        if errors.has_errors():
            logger.info(f"Form submission rejected: {errors.model_dump(exclude_defaults=True)}")
            return SubmitResponse(ok=False, errors=errors, form=form)

        if form.user_id is not None:
            result = await self.update(form.user_id, data)
        else:
            result = await self.create(data)

        return SubmitResponse(ok=True, errors=errors, form=UserForm(), result=result)

    def _finish(
        self,
        operation: SyncOperation,
        outcome: SyncOutcome,
        user: Optional[User] = None,
        error: Optional[str] = None
    ) -> SyncResult:
        result = SyncResult(
            operation=operation,
            outcome=outcome,
            message=MESSAGES[(operation, outcome)],
            user=user,
            error=error
        )
        self.renderer.render(self.store.all())
        self.renderer.notify(result)
        return result


# Global controller instance, created in the application lifespan
_directory_sync: Optional[DirectorySyncController] = None

async def init_directory_sync(base_url: str, timeout: Optional[float] = None, load: bool = True) -> DirectorySyncController:
    """Create the global controller and optionally populate it"""
    global _directory_sync
    _directory_sync = DirectorySyncController(DirectoryClient(base_url, timeout=timeout))
    logger.info(f"Directory sync initialized for {base_url}")
    if load:
        await _directory_sync.load()
    return _directory_sync

async def close_directory_sync():
    """Close the global controller's HTTP client"""
    global _directory_sync
    if _directory_sync:
        await _directory_sync.client.close()
        _directory_sync = None
    logger.info("Directory sync closed")

def get_directory_sync() -> DirectorySyncController:
    """Get the global directory sync controller"""
    if _directory_sync is None:
        raise RuntimeError("Directory sync has not been initialized")
    return _directory_sync
