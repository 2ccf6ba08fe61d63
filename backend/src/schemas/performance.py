"""
Pydantic schemas for performance records.

Provides data validation and field translation for:
- Performance creation input
- Performance partial-update input
- Performance records returned to callers

Design:
- Attributes are snake_case and match the performances table columns
- camelCase aliases are the caller-facing names (coverImage, taggedUsers, ...)
- Null or empty optional strings read from the store become None
- tagged_users is never None when exposed (empty list instead)
- drive_folder_id, created_by and created_at cannot be changed by an update
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ============================================================================
# Request Schemas
# ============================================================================


class PerformanceCreate(BaseModel):
    """
    Input for creating a performance.

    Required:
        title: Performance title
        created_by: Identifier of the creating user

    Optional:
        description, cover_image, start_date, end_date, tagged_users

    Example:
        >>> create = PerformanceCreate(title="Winter Concert", createdBy="u1")
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Performance title",
    )
    description: Optional[str] = Field(default=None, description="Free-form description")
    cover_image: Optional[str] = Field(default=None, max_length=1024, description="Cover image URL")
    start_date: Optional[str] = Field(default=None, max_length=64)
    end_date: Optional[str] = Field(default=None, max_length=64)
    tagged_users: List[str] = Field(
        default_factory=list,
        description="Identifiers of users tagged on the performance",
    )
    created_by: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Identifier of the creating user",
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Winter Concert",
                "description": "Annual winter concert",
                "coverImage": "https://example.com/cover.jpg",
                "startDate": "2025-12-12",
                "endDate": "2025-12-14",
                "taggedUsers": ["u2", "u3"],
                "createdBy": "u1",
            }
        },
    )

    @field_validator("title")
    @classmethod
    def validate_title_not_whitespace(cls, v: str) -> str:
        """Ensure title is not just whitespace; the title is stored as given."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v

    @field_validator("tagged_users", mode="before")
    @classmethod
    def default_tagged_users(cls, v: Any) -> Any:
        return [] if v is None else v

    def to_row(self, drive_folder_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Build the performances row to insert.

        Args:
            drive_folder_id: Remote folder created for this performance, if any

        Returns:
            Dictionary keyed by column name
        """
        row = self.model_dump()
        row["drive_folder_id"] = drive_folder_id
        return row


class PerformanceUpdate(BaseModel):
    """
    Input for a partial performance update.

    Only fields explicitly set on the instance are written; an explicit
    None clears an optional field. Unknown fields (including driveFolderId
    and createdBy) are rejected.

    Example:
        >>> update = PerformanceUpdate(id="pfm_01hgw2bbg...", endDate="2025-12-15")
        >>> update.to_row()
        {'end_date': '2025-12-15'}
    """

    id: str = Field(..., min_length=1, description="Identifier of the performance to update")
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, max_length=1024)
    start_date: Optional[str] = Field(default=None, max_length=64)
    end_date: Optional[str] = Field(default=None, max_length=64)
    tagged_users: Optional[List[str]] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> str:
        """Title may be changed but never cleared."""
        if v is None or not v.strip():
            raise ValueError("Title cannot be cleared or set to whitespace")
        return v

    def to_row(self) -> Dict[str, Any]:
        """Column values for the fields explicitly present on this update."""
        row = self.model_dump(exclude_unset=True, exclude={"id"})
        if "tagged_users" in row and row["tagged_users"] is None:
            row["tagged_users"] = []
        return row


# ============================================================================
# Record Schema
# ============================================================================


class PerformanceResponse(BaseModel):
    """
    Performance record as exposed to callers.

    Built from a performances row; serialize with ``model_dump(by_alias=True)``
    for camelCase keys.

    Fields:
        id: Record identifier (pfm_xxx)
        title: Performance title
        description, cover_image, start_date, end_date: Optional details
        tagged_users: Tagged user identifiers (never None)
        created_by: Creating user
        drive_folder_id: Linked remote folder, if any
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: str
    title: str
    description: Optional[str] = None
    cover_image: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    tagged_users: List[str] = Field(default_factory=list)
    created_by: str
    drive_folder_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_validator(
        "description", "cover_image", "start_date", "end_date", "drive_folder_id",
        mode="before",
    )
    @classmethod
    def empty_to_none(cls, v: Any) -> Any:
        """Null and empty strings from the store both mean 'not set'."""
        if v == "":
            return None
        return v

    @field_validator("tagged_users", mode="before")
    @classmethod
    def null_to_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PerformanceResponse":
        """Translate a performances row (snake_case columns) into a record."""
        return cls.model_validate(dict(row))
