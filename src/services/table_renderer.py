"""
Rendering interface for the user list and status messages
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from models.enums import SyncOutcome
from models.user import SyncResult, TableRow, User

logger = logging.getLogger(__name__)

class UserListRenderer(ABC):
    """Receives the full user list after every operation, plus its status message"""

    @abstractmethod
    def render(self, users: List[User]):
        pass

    @abstractmethod
    def notify(self, result: SyncResult):
        pass


class TableRenderer(UserListRenderer):
    """
    Renders users into table rows keyed by data-id, with edit and delete
    actions wired per row
    """

    def __init__(self, action_prefix: str = "/api/users"):
        self.action_prefix = action_prefix.rstrip("/")
        self.rows: List[TableRow] = []
        self.last_result: Optional[SyncResult] = None

    def render(self, users: List[User]):
        self.rows = [self._row(user) for user in users]

    def notify(self, result: SyncResult):
        self.last_result = result
        if result.outcome == SyncOutcome.SYNCED:
            logger.info(result.message)
        else:
            logger.warning(result.message)

    @property
    def status_message(self) -> Optional[str]:
        return self.last_result.message if self.last_result else None

    def _row(self, user: User) -> TableRow:
        return TableRow(
            data_id=user.id,
            cells=[str(user.id), user.name, user.username, user.email, user.phone, user.website],
            edit_url=f"{self.action_prefix}/{user.id}/edit",
            delete_url=f"{self.action_prefix}/{user.id}",
        )
