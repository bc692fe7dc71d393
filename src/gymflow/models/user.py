"""User account model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """A registered user.

    The password hash is kept on the model for login checks but is never
    part of the serialized form.
    """

    user_name: str
    email: str
    password_hash: str = ""
    profile_picture_url: str | None = None
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Public representation returned by the API."""
        return {
            "id": self.id,
            "userName": self.user_name,
            "email": self.email,
            "profilePictureUrl": self.profile_picture_url,
        }


@dataclass
class UserChanges:
    """Fields a profile edit may change. None means "leave as is"."""

    user_name: str | None = None
    email: str | None = None
    password_hash: str | None = None
    profile_picture_url: str | None = None

    def columns(self) -> dict:
        """Map of column name to new value for the supplied fields only."""
        mapping = {
            "user_name": self.user_name,
            "email": self.email,
            "password": self.password_hash,
            "profile_picture_url": self.profile_picture_url,
        }
        return {col: value for col, value in mapping.items() if value}

    def is_empty(self) -> bool:
        return not self.columns()
