"""
Unit tests for GuidService and Result.
"""

import re
import uuid

from backend.src.services.guid import GuidService, new_performance_id
from backend.src.services.result import ErrorKind, Result


PERFORMANCE_ID_PATTERN = re.compile(r"^pfm_[0-9a-hjkmnp-tv-z]{26}$")


class TestGuidService:
    """Tests for performance identifiers"""

    def test_new_performance_id_format(self):
        guid = new_performance_id()

        assert PERFORMANCE_ID_PATTERN.match(guid)

    def test_generate_uuid_is_version_7(self):
        assert GuidService.generate_uuid().version == 7

    def test_encode_pads_to_fixed_width(self):
        assert GuidService.encode_uuid(uuid.UUID(int=0)) == "pfm_" + "0" * 26
        assert GuidService.encode_uuid(uuid.UUID(int=1)) == "pfm_" + "0" * 25 + "1"
        assert GuidService.encode_uuid(uuid.UUID(int=32)) == "pfm_" + "0" * 24 + "10"

    def test_encode_max_uuid_fits(self):
        guid = GuidService.encode_uuid(uuid.UUID(int=(1 << 128) - 1))

        assert PERFORMANCE_ID_PATTERN.match(guid)

    def test_ids_are_unique(self):
        first = new_performance_id()
        second = new_performance_id()

        assert first != second


class TestResult:
    """Tests for Result"""

    def test_ok(self):
        result = Result.ok([1, 2])

        assert result.is_ok
        assert result.unwrap_or([]) == [1, 2]

    def test_ok_none_value(self):
        assert Result.ok(None).is_ok

    def test_err(self):
        result = Result.err(ErrorKind.STORE_ERROR, "connection refused")

        assert not result.is_ok
        assert result.error == ErrorKind.STORE_ERROR
        assert result.message == "connection refused"
        assert result.unwrap_or(False) is False
