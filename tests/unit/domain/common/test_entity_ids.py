"""Tests for entity identifiers and identity-based equality."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from chirper.domain.common.entity import Entity
from chirper.domain.common.exceptions import ValidationError
from chirper.domain.common.value_objects.ids import TweetId, UserId


@dataclass(eq=False)
class Widget(Entity[UserId]):
    id: UserId
    name: str = field(default="")


class TestEntityId:
    def test_generate_returns_random_v4_uuids(self) -> None:
        first = UserId.generate()
        second = UserId.generate()

        assert first != second
        assert first.value.version == 4

    def test_parse_roundtrips_canonical_form(self) -> None:
        user_id = UserId.generate()
        assert UserId.parse(str(user_id)) == user_id

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234", None])
    def test_parse_rejects_malformed_input(self, raw) -> None:
        with pytest.raises(ValidationError):
            UserId.parse(raw)

    def test_rejects_non_uuid_value(self) -> None:
        with pytest.raises(ValidationError):
            UserId("3f2b7c1e-0000-4000-8000-000000000000")  # type: ignore[arg-type]

    def test_ids_of_different_types_are_not_equal(self) -> None:
        raw = uuid4()
        assert UserId(raw) != TweetId(raw)

    def test_is_hashable_and_frozen(self) -> None:
        user_id = UserId.generate()
        assert {user_id: 1}[UserId(user_id.value)] == 1
        with pytest.raises(AttributeError):
            user_id.value = uuid4()  # type: ignore[misc]

    def test_to_primitive_is_string(self) -> None:
        raw = UUID("12345678-1234-4234-8234-123456789abc")
        assert UserId(raw).to_primitive() == "12345678-1234-4234-8234-123456789abc"


class TestEntityEquality:
    def test_equal_when_ids_match_regardless_of_fields(self) -> None:
        user_id = UserId.generate()
        assert Widget(user_id, "a") == Widget(user_id, "b")

    def test_not_equal_when_ids_differ(self) -> None:
        assert Widget(UserId.generate(), "a") != Widget(UserId.generate(), "a")

    def test_hash_follows_id(self) -> None:
        user_id = UserId.generate()
        assert len({Widget(user_id, "a"), Widget(user_id, "b")}) == 1
