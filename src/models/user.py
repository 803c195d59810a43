"""
User directory Pydantic models
"""

from typing import List, Optional
from pydantic import BaseModel, Field, computed_field, field_validator
from models.enums import SyncOperation, SyncOutcome

USER_FIELDS = ("name", "username", "email", "phone", "website")

class UserData(BaseModel):
    """Fields sent to the remote directory on create and update"""
    name: str = ""
    username: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""

    @field_validator(*USER_FIELDS, mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v

    def to_data(self) -> "UserData":
        """Just the directory fields, without id or form state"""
        return UserData(**self.model_dump(include=set(USER_FIELDS)))

class User(UserData):
    """A user record as held in the in-memory list"""
    id: int

    @classmethod
    def from_data(cls, user_id: int, data: UserData) -> "User":
        return cls(id=int(user_id), **data.model_dump())


class UserForm(UserData):
    """Form state: field values plus the id of the user being edited, if any"""
    user_id: Optional[int] = Field(None, description="Set when the form is editing an existing user")

    @field_validator("user_id", mode="before")
    @classmethod
    def blank_user_id(cls, v):
        # An empty hidden input means "add", not an invalid id
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @computed_field
    @property
    def submit_label(self) -> str:
        return "Update User" if self.user_id is not None else "Add User"


class UserFormErrors(BaseModel):
    """Per-field error slots; an empty string means the field is valid"""
    name: str = ""
    username: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""

    def has_errors(self) -> bool:
        return any(getattr(self, field) for field in USER_FIELDS)


class TableRow(BaseModel):
    """One rendered row of the user table"""
    data_id: int
    cells: List[str]
    edit_url: str
    delete_url: str


class SyncResult(BaseModel):
    """Outcome of one directory operation, as shown to the user"""
    operation: SyncOperation
    outcome: SyncOutcome
    message: str
    user: Optional[User] = None
    error: Optional[str] = None


class UserTableResponse(BaseModel):
    rows: List[TableRow]
    count: int
    status_message: Optional[str] = None
    status_outcome: Optional[SyncOutcome] = None


class SubmitResponse(BaseModel):
    """Response for a form submission"""
    ok: bool
    errors: UserFormErrors
    form: UserForm
    result: Optional[SyncResult] = None
