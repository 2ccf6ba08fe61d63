"""
Performance model.

A performance is a titled production (concert, show, recital) with optional
dates, a cover image and a list of tagged collaborators. Each performance may
be linked to a remote folder (Google Drive) created alongside the record.

Design Rationale:
- id is an opaque string assigned on insert (pfm_xxx GUID)
- tagged_users holds opaque user identifiers, order preserved
- drive_folder_id is written once at creation, never updated
- start_date/end_date are kept as the strings supplied by callers
"""

from datetime import datetime

from sqlalchemy import Column, String, DateTime, Text

from backend.src.models import Base
from backend.src.models.types import JSONBType
from backend.src.services.guid import new_performance_id


class Performance(Base):
    """
    Performance record.

    Attributes:
        id: Primary key, GUID string (pfm_xxx) generated on insert
        title: Performance title (required)
        description: Free-form description
        cover_image: Cover image URL
        start_date: Start date as supplied by the caller
        end_date: End date as supplied by the caller
        tagged_users: List of user identifiers tagged on the performance
        created_by: Identifier of the creating user (immutable)
        drive_folder_id: Remote folder identifier, set at creation
        created_at: Creation timestamp
        updated_at: Last update timestamp

    Indexes:
        - created_at (for newest-first listing)
    """

    __tablename__ = "performances"

    id = Column(String(40), primary_key=True, default=new_performance_id)

    # Core fields
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    cover_image = Column(String(1024), nullable=True)
    start_date = Column(String(64), nullable=True)
    end_date = Column(String(64), nullable=True)
    tagged_users = Column(JSONBType, nullable=True)

    # Attribution
    created_by = Column(String(255), nullable=False)

    # Remote folder link
    drive_folder_id = Column(String(255), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<Performance("
            f"id='{self.id}', "
            f"title='{self.title}'"
            f")>"
        )

    def __str__(self) -> str:
        """Human-readable string representation."""
        return self.title
