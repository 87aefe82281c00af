"""Tests for the helper registry and built-in helpers.

Covers:
- Identifier case converters
- JSON pretty-printing
- Deterministic mock values
- Registry overwrite and lookup-miss behaviour
"""

from __future__ import annotations

import pytest

from stencil.engine.helpers import (
    BUILTIN_HELPERS,
    HelperRegistry,
    camel_case,
    kebab_case,
    mock_value,
    pascal_case,
    register_builtin_helpers,
    snake_case,
    to_json,
)
from stencil.engine.resolver import MISSING


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


class TestCaseHelpers:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("user-profile", "UserProfile"),
            ("user_profile", "UserProfile"),
            ("userProfile", "UserProfile"),
            ("UserProfile", "UserProfile"),
            ("user profile", "UserProfile"),
            ("user", "User"),
        ],
    )
    def test_pascal_case(self, value, expected):
        assert pascal_case(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("user-profile", "userProfile"),
            ("UserProfile", "userProfile"),
            ("user_profile_id", "userProfileId"),
        ],
    )
    def test_camel_case(self, value, expected):
        assert camel_case(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("UserProfile", "user-profile"),
            ("userProfile", "user-profile"),
            ("user_profile", "user-profile"),
            ("user-profile", "user-profile"),
        ],
    )
    def test_kebab_case(self, value, expected):
        assert kebab_case(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("UserProfile", "user_profile"),
            ("user-profile", "user_profile"),
            ("orderItem", "order_item"),
        ],
    )
    def test_snake_case(self, value, expected):
        assert snake_case(value) == expected

    def test_empty_string(self):
        assert camel_case("") == ""
        assert kebab_case("") == ""

    def test_non_string_is_coerced(self):
        assert pascal_case(42) == "42"

    @pytest.mark.parametrize("fn", [pascal_case, camel_case, kebab_case, snake_case])
    def test_undefined_raises(self, fn):
        with pytest.raises(TypeError):
            fn(MISSING)

    def test_none_raises(self):
        with pytest.raises(TypeError):
            kebab_case(None)


# ---------------------------------------------------------------------------
# json / mockValue
# ---------------------------------------------------------------------------


class TestJsonHelper:
    def test_two_space_indent(self):
        assert to_json({"a": [1, 2]}) == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_scalar(self):
        assert to_json("x") == '"x"'

    def test_undefined_raises(self):
        with pytest.raises(TypeError):
            to_json(MISSING)


class TestMockValue:
    def test_string(self):
        assert mock_value("string", 0) == "'Sample text 1'"
        assert mock_value("string", 4) == "'Sample text 5'"

    def test_email(self):
        assert mock_value("email", 2) == "'user3@example.com'"

    def test_url(self):
        assert mock_value("url", 0) == "'https://example.com/item1'"

    def test_phone(self):
        assert mock_value("phone", 0) == "'13800000001'"

    def test_date(self):
        assert mock_value("date", 0) == "new Date('2024-01-01').toISOString()"
        assert mock_value("date", 9) == "new Date('2024-01-10').toISOString()"

    def test_number_is_deterministic(self):
        first = mock_value("number", 3)
        assert first == mock_value("number", 3)
        assert 1 <= int(first) <= 1000

    def test_boolean_is_deterministic(self):
        value = mock_value("boolean", 1)
        assert value in ("true", "false")
        assert value == mock_value("boolean", 1)

    def test_unknown_type(self):
        assert mock_value("uuid", 1) == "'Default value 2'"

    def test_missing_arguments(self):
        assert mock_value(MISSING, MISSING) == "'Default value 1'"

    def test_string_index(self):
        assert mock_value("email", "1") == "'user2@example.com'"

    def test_bad_index_raises(self):
        with pytest.raises(ValueError):
            mock_value("email", "first")


# ---------------------------------------------------------------------------
# HelperRegistry
# ---------------------------------------------------------------------------


class TestHelperRegistry:
    def test_register_and_get(self):
        registry = HelperRegistry()
        registry.register("upper", str.upper)
        assert registry.get("upper") is str.upper
        assert "upper" in registry

    def test_miss_returns_none(self):
        assert HelperRegistry().get("nope") is None

    def test_overwrite(self):
        registry = HelperRegistry()
        registry.register("h", lambda v: "one")
        registry.register("h", lambda v: "two")
        assert registry.get("h")("x") == "two"
        assert len(registry) == 1

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            HelperRegistry().register("h", "not callable")

    def test_builtins(self):
        registry = HelperRegistry()
        register_builtin_helpers(registry)
        assert registry.list() == sorted(BUILTIN_HELPERS)

    def test_clear(self):
        registry = HelperRegistry()
        register_builtin_helpers(registry)
        registry.clear()
        assert registry.list() == []
