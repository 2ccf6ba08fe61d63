"""
Identifiers for performance records.

Format: pfm_{base32_uuid}
- base32_uuid: 26-character lowercase Crockford Base32 encoded UUIDv7

UUIDv7 values are time-ordered, which keeps the primary key index append-mostly.
"""

import uuid

import base32_crockford
from uuid_extensions import uuid7


PERFORMANCE_PREFIX = "pfm"
ENCODED_LENGTH = 26


class GuidService:
    """Generation and encoding of performance identifiers."""

    @staticmethod
    def generate_uuid() -> uuid.UUID:
        """Generate a new UUIDv7 value."""
        return uuid7()

    @staticmethod
    def encode_uuid(uuid_value: uuid.UUID, prefix: str = PERFORMANCE_PREFIX) -> str:
        """
        Encode a UUID to a GUID string.

        Example:
            >>> GuidService.encode_uuid(uuid.UUID(int=1))
            'pfm_00000000000000000000000001'
        """
        encoded = base32_crockford.encode(uuid_value.int).zfill(ENCODED_LENGTH)
        return f"{prefix}_{encoded.lower()}"


def new_performance_id() -> str:
    """Column default for performances.id."""
    return GuidService.encode_uuid(GuidService.generate_uuid())
