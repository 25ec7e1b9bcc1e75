"""
Naming strategies: pure functions turning a declared member name into its
serialized wire name.
"""
import re
from typing import Callable, Dict

NamingStrategy = Callable[[str], str]

# Splits "firstName", "first_name", "URLValue", "first-name2" into words
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def _split_words(name: str) -> list[str]:
    return _WORD_PATTERN.findall(name.replace("-", "_"))


def default_naming(name: str) -> str:
    """Keeps names exactly as declared."""
    return name


def camel_case(name: str) -> str:
    """Converts a member name to camelCase.

    Examples:
        "Name" -> "name"
        "first_name" -> "firstName"
        "URLValue" -> "urlValue"
        "ID" -> "id"
    """
    words = _split_words(name)
    if not words:
        return name
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def snake_case(name: str) -> str:
    """Converts a member name to snake_case ("FirstName" -> "first_name")."""
    words = _split_words(name)
    if not words:
        return name
    return "_".join(word.lower() for word in words)


def kebab_case(name: str) -> str:
    """Converts a member name to kebab-case ("FirstName" -> "first-name")."""
    words = _split_words(name)
    if not words:
        return name
    return "-".join(word.lower() for word in words)


NAMING_STRATEGIES: Dict[str, NamingStrategy] = {
    "default": default_naming,
    "camel": camel_case,
    "snake": snake_case,
    "kebab": kebab_case,
}


def get_naming_strategy(name: str) -> NamingStrategy:
    """Looks up a built-in naming strategy by its configuration name."""
    try:
        return NAMING_STRATEGIES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown naming strategy '{name}'. Expected one of: {', '.join(NAMING_STRATEGIES)}"
        ) from None
