"""Tests for version 4 UUID generation and validation."""

import uuid

import pytest

from frozengraph.domain.ids import UUID_PATTERN, generate_uuid, validate_uuid


def _fixed(byte: int):
    return lambda n: bytes([byte]) * n


class TestGenerateUuid:
    def test_canonical_layout(self) -> None:
        value = generate_uuid()
        assert [len(part) for part in value.split("-")] == [8, 4, 4, 4, 12]
        assert value == value.lower()

    def test_version_and_variant_bits(self) -> None:
        parsed = uuid.UUID(generate_uuid())
        assert parsed.version == 4
        assert parsed.variant == uuid.RFC_4122

    def test_fixed_bits_override_random_source(self) -> None:
        assert generate_uuid(_fixed(0xFF)) == "ffffffff-ffff-4fff-bfff-ffffffffffff"
        assert generate_uuid(_fixed(0x00)) == "00000000-0000-4000-8000-000000000000"

    def test_uses_random_source(self) -> None:
        calls: list[int] = []

        def source(n: int) -> bytes:
            calls.append(n)
            return bytes(range(n))

        assert generate_uuid(source) == "00010203-0405-4607-8809-0a0b0c0d0e0f"
        assert calls == [16]

    def test_short_random_source_rejected(self) -> None:
        with pytest.raises(ValueError, match="expected 16"):
            generate_uuid(lambda n: b"\x00" * 4)

    def test_successive_ids_differ(self) -> None:
        assert len({generate_uuid() for _ in range(50)}) == 50


class TestValidateUuid:
    def test_generated_ids_validate(self) -> None:
        assert all(validate_uuid(generate_uuid()) for _ in range(20))

    @pytest.mark.parametrize(
        "value",
        [
            "00000000-0000-1000-8000-000000000000",  # version 1
            "00000000-0000-4000-c000-000000000000",  # wrong variant
            "00000000-0000-4000-8000-00000000000",  # short final group
            "00000000000040008000000000000000",  # no hyphens
            "FFFFFFFF-FFFF-4FFF-BFFF-FFFFFFFFFFFF",  # uppercase
            "",
        ],
    )
    def test_rejects(self, value: str) -> None:
        assert not validate_uuid(value)

    def test_pattern_is_anchored(self) -> None:
        assert UUID_PATTERN.match("x00000000-0000-4000-8000-000000000000") is None
