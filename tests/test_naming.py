from __future__ import annotations

import pytest

from envbind.errors import EmptyTagError
from envbind.naming import normalize_tag, struct_key


def test_short_tag_is_uppercased_and_prefixed() -> None:
    assert normalize_tag("port", "MYAPP_") == "MYAPP_PORT"
    assert normalize_tag("e2int", "TEST_") == "TEST_E2INT"


def test_dashes_become_underscores() -> None:
    assert normalize_tag("db-host", "MYAPP_") == "MYAPP_DB_HOST"


def test_prefixed_tag_is_left_unchanged() -> None:
    assert normalize_tag("MYAPP_PORT", "MYAPP_") == "MYAPP_PORT"
    # case-insensitive match keeps the caller's spelling
    assert normalize_tag("myapp_port", "MYAPP_") == "myapp_port"


def test_lowercase_prefix_matches_case_insensitively() -> None:
    assert normalize_tag("port", "app_") == "app_PORT"
    assert normalize_tag("APP_PORT", "app_") == "APP_PORT"


def test_tag_no_longer_than_prefix_gets_prefixed() -> None:
    assert normalize_tag("TEST_", "TEST_") == "TEST_TEST_"
    assert normalize_tag("te", "TEST_") == "TEST_TE"


def test_normalization_is_idempotent() -> None:
    for prefix in ("", "TEST_", "app_"):
        for tag in ("port", "db-host", "TEST_PORT", "x"):
            once = normalize_tag(tag, prefix)
            assert normalize_tag(once, prefix) == once


def test_empty_prefix_uses_tag_verbatim() -> None:
    assert normalize_tag("e2int", "") == "e2int"
    assert normalize_tag("a-b", "") == "a_b"


def test_empty_tag_rejected() -> None:
    with pytest.raises(EmptyTagError):
        normalize_tag("", "TEST_")
    with pytest.raises(EmptyTagError):
        struct_key("", "TEST_")


def test_struct_key_uppercases_without_folding() -> None:
    assert struct_key("db-host", "app_") == "APP_DB-HOST"
    assert struct_key("TEST_PORT", "TEST_") == "TEST_TEST_PORT"
