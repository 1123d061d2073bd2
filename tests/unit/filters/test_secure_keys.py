"""Tests for secure key recognition."""

from __future__ import annotations

import pytest

from strongbox.filters.secure_keys import SettingsLeaf, is_secure_key, secure_keys


@pytest.mark.parametrize(
    "key",
    ["_secure_password", "_secure_", "_secure_my_secure_setting", "_secure_123"],
)
def test_keys_starting_with_prefix_are_secure(key: str) -> None:
    assert is_secure_key(key)


@pytest.mark.parametrize(
    "key",
    [
        "secure_setting",
        "my_secure_setting",
        "setting_secure_",
        "_Secure_password",
        "__secure_password",
        "_secure",
        "",
    ],
)
def test_keys_without_the_exact_prefix_are_not_secure(key: str) -> None:
    assert not is_secure_key(key)


@pytest.mark.parametrize("key", [None, 1, ("_secure_x",), b"_secure_x"])
def test_non_string_keys_are_never_secure(key: object) -> None:
    assert not is_secure_key(key)


def test_custom_prefix() -> None:
    assert is_secure_key("enc_token", prefix="enc_")
    assert not is_secure_key("_secure_token", prefix="enc_")


class TestSettingsLeaf:
    def test_classify_tags_from_key(self) -> None:
        leaf = SettingsLeaf.classify("db._secure_pw", "_secure_pw", "x")

        assert leaf.is_secure
        assert leaf.path == "db._secure_pw"
        assert leaf.value == "x"

    def test_classify_inherits_secure_tag(self) -> None:
        leaf = SettingsLeaf.classify("_secure_list[0]", "plain", "x", inherited=True)

        assert leaf.is_secure

    def test_leaf_is_immutable(self) -> None:
        leaf = SettingsLeaf("a", 1, False)

        with pytest.raises(AttributeError):
            leaf.is_secure = True  # type: ignore[misc]


def test_secure_keys_lists_dotted_paths_in_order() -> None:
    tree = {
        "_secure_api_key": "x",
        "name": "app",
        "database": {"_secure_password": "y", "secure_host": "z"},
        "_secure_group": {"_secure_inner": "w", "plain": "v"},
    }

    assert secure_keys(tree) == [
        "_secure_api_key",
        "database._secure_password",
        "_secure_group._secure_inner",
    ]


def test_secure_keys_with_custom_prefix() -> None:
    assert secure_keys({"enc_a": 1, "_secure_b": 2}, prefix="enc_") == ["enc_a"]
