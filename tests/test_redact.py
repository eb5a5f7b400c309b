from __future__ import annotations

import logging

import pytest

from pyreward._redact import mask_identity, truncate_for_log
from pyreward.config import RewardConfig
from pyreward.state.store import GreetingStore


def test_truncate_for_log_shortens_long_strings() -> None:
    truncated = truncate_for_log("x" * 600, max_string=10)
    assert truncated.startswith("x" * 10)
    assert "<truncated:600>" in truncated


def test_truncate_for_log_leaves_short_and_non_strings() -> None:
    assert truncate_for_log("short") == "short"
    assert truncate_for_log(5) == 5


def test_mask_identity() -> None:
    assert mask_identity("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed") == "0x5aAe…1BeAed"
    assert mask_identity("alice") == "alice"
    assert mask_identity(None) == "<none>"


def test_store_debug_log_is_truncated(caplog: pytest.LogCaptureFixture) -> None:
    store = GreetingStore("alice", config=RewardConfig(log_value_max_length=8))

    with caplog.at_level(logging.DEBUG, logger="pyreward.state.store"):
        store.write("y" * 100)

    messages = [record.getMessage() for record in caplog.records]
    assert any("<truncated:100>" in message for message in messages)
    assert not any("y" * 100 in message for message in messages)
