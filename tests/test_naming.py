"""Tests for the naming strategies."""
import pytest

from openapi_reflect.schema_gen.naming import (
    NAMING_STRATEGIES,
    camel_case,
    default_naming,
    get_naming_strategy,
    kebab_case,
    snake_case,
)


@pytest.mark.parametrize("name, expected", [
    ("Name", "name"),
    ("first_name", "firstName"),
    ("FirstName", "firstName"),
    ("URLValue", "urlValue"),
    ("ID", "id"),
    ("order-id", "orderId"),
    ("line2", "line2"),
    ("", ""),
])
def test_camel_case(name: str, expected: str) -> None:
    assert camel_case(name) == expected


@pytest.mark.parametrize("name, expected", [
    ("FirstName", "first_name"),
    ("firstName", "first_name"),
    ("HTTPStatus", "http_status"),
    ("already_snake", "already_snake"),
])
def test_snake_case(name: str, expected: str) -> None:
    assert snake_case(name) == expected


def test_kebab_case() -> None:
    assert kebab_case("FirstName") == "first-name"
    assert kebab_case("URLValue") == "url-value"


def test_default_naming_is_identity() -> None:
    assert default_naming("Some_Name") == "Some_Name"


def test_get_naming_strategy_is_case_insensitive() -> None:
    assert get_naming_strategy("Camel") is camel_case
    assert set(NAMING_STRATEGIES) == {"default", "camel", "snake", "kebab"}


def test_get_naming_strategy_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown naming strategy"):
        get_naming_strategy("pascal")
