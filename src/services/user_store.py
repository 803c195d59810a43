"""
In-memory user store owned by the directory sync controller
"""

import logging
from typing import List, Optional

from models.user import User

logger = logging.getLogger(__name__)

class DuplicateUserIdError(ValueError):
    """Raised when a user with an already-stored id is inserted"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User id already present in store: {user_id}")


class UserStore:
    """Ordered list of user records with unique ids, in fetch/insertion order"""

    def __init__(self, users: Optional[List[User]] = None):
        self._users: List[User] = []
        if users:
            self.replace_all(users)

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: int) -> bool:
        return self._index_of(user_id) is not None

    def all(self) -> List[User]:
        """Snapshot of the stored users"""
        return list(self._users)

    def get(self, user_id: int) -> Optional[User]:
        index = self._index_of(user_id)
        return self._users[index] if index is not None else None

    def ids(self) -> List[int]:
        return [user.id for user in self._users]

    def next_id(self) -> int:
        """Local id for a record the server did not assign: max(existing) + 1"""
        return max(self.ids(), default=0) + 1

    def replace_all(self, users: List[User]):
        """Reset the store to the given list, keeping the first of any repeated id"""
        self._users = []
        for user in users:
            if user.id in self:
                logger.warning(f"Dropping duplicate user id {user.id} from loaded list")
                continue
            self._users.append(user)

    def append(self, user: User):
        if user.id in self:
            raise DuplicateUserIdError(user.id)
        self._users.append(user)

    def replace(self, user_id: int, user: User) -> bool:
        """Replace the record with user_id in place. Returns False if absent."""
        index = self._index_of(user_id)
        if index is None:
            return False
        if user.id != user_id and user.id in self:
            raise DuplicateUserIdError(user.id)
        self._users[index] = user
        return True

    def remove(self, user_id: int) -> bool:
        """Remove every record with user_id. Returns False if none was stored."""
        before = len(self._users)
        self._users = [user for user in self._users if user.id != user_id]
        return len(self._users) != before

    def clear(self):
        self._users = []

    def _index_of(self, user_id: int) -> Optional[int]:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None
