from __future__ import annotations

import pytest
from pydantic import ValidationError

from pyreward.exceptions import InvalidArgumentError
from pyreward.models.identity import OwnerIdentity, normalize_identity


def test_address_normalized_to_lowercase() -> None:
    checksum = OwnerIdentity.parse("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed")
    lower = OwnerIdentity.parse("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed")
    assert checksum == lower
    assert hash(checksum) == hash(lower)
    assert checksum.is_address


def test_upper_prefix_address_accepted() -> None:
    identity = OwnerIdentity.parse("0X5AAEB6053F3E94C9B9A09F33669435E7EF1BEAED")
    assert str(identity) == "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"


def test_opaque_identity_kept_verbatim() -> None:
    identity = OwnerIdentity.parse("  Alice@Example  ")
    assert identity.value == "Alice@Example"
    assert not identity.is_address


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "two words",
        "0x",
        "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAe",
        "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAedd",
        "0xg000000000000000000000000000000000000000",
    ],
)
def test_malformed_identity_rejected(raw: str) -> None:
    with pytest.raises(InvalidArgumentError):
        normalize_identity(raw)
    with pytest.raises(InvalidArgumentError):
        OwnerIdentity.parse(raw)


def test_non_string_identity_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        OwnerIdentity.parse(b"0xabc")  # type: ignore[arg-type]


def test_direct_construction_raises_validation_error() -> None:
    with pytest.raises(ValidationError):
        OwnerIdentity(value="")


def test_parse_returns_existing_identity_unchanged() -> None:
    identity = OwnerIdentity(value="bob")
    assert OwnerIdentity.parse(identity) is identity


def test_invalid_argument_is_value_error() -> None:
    with pytest.raises(ValueError):
        OwnerIdentity.parse("")
