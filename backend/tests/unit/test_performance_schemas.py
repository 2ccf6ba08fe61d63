"""
Unit tests for performance schemas.

Tests validation of create/update input and row-to-record translation.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from backend.src.schemas.performance import (
    PerformanceCreate,
    PerformanceResponse,
    PerformanceUpdate,
)


def _row(**overrides):
    row = {
        "id": "pfm_01hgw2bbg0000000000000001",
        "title": "Gala",
        "description": None,
        "cover_image": None,
        "start_date": None,
        "end_date": None,
        "tagged_users": None,
        "created_by": "u1",
        "drive_folder_id": None,
        "created_at": datetime(2025, 1, 1, 12, 0, 0),
        "updated_at": datetime(2025, 1, 1, 12, 0, 0),
    }
    row.update(overrides)
    return row


class TestPerformanceCreate:
    """Tests for PerformanceCreate"""

    def test_accepts_camel_case(self):
        data = PerformanceCreate(
            title="Gala",
            coverImage="https://example.com/c.jpg",
            taggedUsers=["u2"],
            createdBy="u1",
        )

        assert data.cover_image == "https://example.com/c.jpg"
        assert data.tagged_users == ["u2"]
        assert data.created_by == "u1"

    def test_accepts_snake_case(self):
        data = PerformanceCreate(title="Gala", created_by="u1", start_date="2025-05-01")

        assert data.start_date == "2025-05-01"

    def test_tagged_users_default_empty(self):
        assert PerformanceCreate(title="Gala", createdBy="u1").tagged_users == []
        assert PerformanceCreate(title="Gala", createdBy="u1", taggedUsers=None).tagged_users == []

    def test_title_kept_as_given(self):
        assert PerformanceCreate(title="  Gala  ", createdBy="u1").title == "  Gala  "

    @pytest.mark.parametrize("title", ["", "   "])
    def test_title_required(self, title):
        with pytest.raises(ValidationError):
            PerformanceCreate(title=title, createdBy="u1")

    def test_created_by_required(self):
        with pytest.raises(ValidationError):
            PerformanceCreate(title="Gala")

    def test_to_row_uses_column_names(self):
        row = PerformanceCreate(title="Gala", createdBy="u1", endDate="2025-05-02").to_row("fld_1")

        assert row == {
            "title": "Gala",
            "description": None,
            "cover_image": None,
            "start_date": None,
            "end_date": "2025-05-02",
            "tagged_users": [],
            "created_by": "u1",
            "drive_folder_id": "fld_1",
        }


class TestPerformanceUpdate:
    """Tests for PerformanceUpdate"""

    def test_to_row_only_set_fields(self):
        update = PerformanceUpdate(id="pfm_x", endDate="2025-05-02")

        assert update.to_row() == {"end_date": "2025-05-02"}

    def test_to_row_keeps_explicit_none(self):
        update = PerformanceUpdate(id="pfm_x", description=None, coverImage=None)

        assert update.to_row() == {"description": None, "cover_image": None}

    def test_to_row_tagged_users_none_becomes_empty(self):
        assert PerformanceUpdate(id="pfm_x", taggedUsers=None).to_row() == {"tagged_users": []}

    def test_to_row_empty(self):
        assert PerformanceUpdate(id="pfm_x").to_row() == {}

    @pytest.mark.parametrize("field", ["driveFolderId", "drive_folder_id", "createdBy", "createdAt"])
    def test_immutable_fields_rejected(self, field):
        with pytest.raises(ValidationError):
            PerformanceUpdate(id="pfm_x", **{field: "value"})

    def test_title_kept_as_given(self):
        assert PerformanceUpdate(id="pfm_x", title=" Gala ").to_row() == {"title": " Gala "}

    @pytest.mark.parametrize("title", [None, "", "  "])
    def test_title_cannot_be_cleared(self, title):
        with pytest.raises(ValidationError):
            PerformanceUpdate(id="pfm_x", title=title)


class TestPerformanceResponse:
    """Tests for row translation"""

    def test_from_row_nulls(self):
        record = PerformanceResponse.from_row(_row())

        assert record.description is None
        assert record.tagged_users == []
        assert record.drive_folder_id is None

    def test_from_row_empty_strings_are_unset(self):
        record = PerformanceResponse.from_row(_row(description="", cover_image="", drive_folder_id=""))

        assert record.description is None
        assert record.cover_image is None
        assert record.drive_folder_id is None

    def test_from_row_values(self):
        record = PerformanceResponse.from_row(
            _row(description="Opening night", tagged_users=["u2", "u3"], drive_folder_id="fld_1")
        )

        assert record.description == "Opening night"
        assert record.tagged_users == ["u2", "u3"]
        assert record.drive_folder_id == "fld_1"

    def test_dump_by_alias(self):
        data = PerformanceResponse.from_row(_row(cover_image="c.jpg")).model_dump(by_alias=True)

        assert set(data) == {
            "id", "title", "description", "coverImage", "startDate", "endDate",
            "taggedUsers", "createdBy", "driveFolderId", "createdAt", "updatedAt",
        }
        assert data["coverImage"] == "c.jpg"
