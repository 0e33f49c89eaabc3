"""
Subject MongoDB Schema

Defines the Subject document model for the 'subjects' collection.
Subjects are the categories documents are filed under.

Schema Fields:
- _id: ObjectId
- name: Subject name (e.g., "Linear Algebra")
- description: Optional free text
- is_deleted: Soft-delete flag
- created_at, updated_at: Timestamps
"""

from typing import Optional

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field

from database.base import BaseDocument


class Subject(BaseDocument):
    """A subject (category) documents belong to."""

    name: str
    description: Optional[str] = None
    is_deleted: bool = False

    class Settings(BaseDocument.Settings):
        name = "subjects"


class SubjectView(BaseModel):
    """Subject as embedded into a document: soft-delete flag and timestamps hidden."""

    model_config = ConfigDict(populate_by_name=True)

    id: PydanticObjectId = Field(validation_alias="_id")
    name: str
    description: Optional[str] = None

    class Settings:
        projection = {
            "is_deleted": 0,
            "created_at": 0,
            "updated_at": 0,
            "revision_id": 0,
        }
