"""
User MongoDB Schema

Defines the User document model for the 'users' collection.
Users author documents; this service only reads them.

Schema Fields:
- _id: ObjectId (MongoDB auto-generated)
- name: Display name
- email: Login email (unique)
- avatar: Optional avatar URL
- is_blocked: Account suspended by an administrator
- roles: Role names, "admin" grants the administrative endpoints
- created_at, updated_at: Timestamps
"""

from typing import List, Optional

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field
from pymongo import ASCENDING, IndexModel

from database.base import BaseDocument

ADMIN_ROLE = "admin"


class User(BaseDocument):
    """A registered user."""

    name: str
    email: str
    avatar: Optional[str] = None
    is_blocked: bool = False
    roles: List[str] = Field(default_factory=lambda: ["user"])

    class Settings(BaseDocument.Settings):
        name = "users"
        indexes = [
            IndexModel([("email", ASCENDING)], unique=True, name="email_unique"),
        ]

    @property
    def is_admin(self) -> bool:
        return ADMIN_ROLE in self.roles


class AuthorView(BaseModel):
    """User as embedded into a document: no moderation or audit fields."""

    model_config = ConfigDict(populate_by_name=True)

    id: PydanticObjectId = Field(validation_alias="_id")
    name: str
    email: str
    avatar: Optional[str] = None

    class Settings:
        projection = {
            "is_blocked": 0,
            "roles": 0,
            "created_at": 0,
            "updated_at": 0,
            "revision_id": 0,
        }
