"""Entity name formatting.

Turns the entity name given on the command line into the bundle of case
variants the templates and destination paths are written with::

    >>> format_entity_name("user-profile").plural_pascal_case
    'UserProfiles'

The kebab-case form is always computed first.  camelCase and PascalCase are
derived from it, and every plural is taken from the already-cased singular,
so ``pascal_case`` and ``plural_pascal_case`` always agree with
``to_pascal_case(kebab_case)`` and ``to_pascal_case(pluralize(kebab_case))``.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from ..errors import InvalidEntityNameError

__all__ = [
    "EntityNameFormats",
    "format_entity_name",
    "pluralize",
    "split_words",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "validate_entity_name",
]


_ENTITY_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)*$")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")
_LAST_WORD = re.compile(r"(?P<head>.*?)(?P<word>[A-Z][a-z]*|[a-z]+)$")


# ---------------------------------------------------------------------------
# Value object
# ---------------------------------------------------------------------------


class EntityNameFormats(BaseModel):
    """Every case variant of an entity name used by the templates."""

    model_config = ConfigDict(frozen=True)

    kebab_case: str
    camel_case: str
    pascal_case: str
    plural_kebab_case: str
    plural_camel_case: str
    plural_pascal_case: str


def format_entity_name(entity_name: str) -> EntityNameFormats:
    """Generate all format variations of *entity_name*.

    Args:
        entity_name: Entity name, normally in kebab-case (``"user-profile"``).

    Returns:
        A frozen :class:`EntityNameFormats`.

    Raises:
        InvalidEntityNameError: if the name contains no letters or digits.
    """
    kebab_case = to_kebab_case(entity_name)
    if not kebab_case:
        raise InvalidEntityNameError(f"Entity name '{entity_name}' has no usable characters")

    camel_case = to_camel_case(kebab_case)
    pascal_case = to_pascal_case(kebab_case)

    return EntityNameFormats(
        kebab_case=kebab_case,
        camel_case=camel_case,
        pascal_case=pascal_case,
        plural_kebab_case=pluralize(kebab_case),
        plural_camel_case=pluralize(camel_case),
        plural_pascal_case=pluralize(pascal_case),
    )


def validate_entity_name(entity_name: str) -> str:
    """Check that *entity_name* is a lower-case kebab-case identifier.

    Returns the name unchanged so the call can be chained.

    Raises:
        InvalidEntityNameError: for empty names or names with characters
            other than lower-case letters, digits and single hyphens.
    """
    if not entity_name:
        raise InvalidEntityNameError("Entity name cannot be empty")
    if not _ENTITY_NAME_PATTERN.match(entity_name):
        raise InvalidEntityNameError(
            f"Invalid entity name '{entity_name}'. Use kebab-case: lower-case "
            "letters, digits and hyphens, starting with a letter (e.g. user-profile)"
        )
    return entity_name


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


def split_words(value: str) -> list[str]:
    """Split *value* into words on separators and case transitions.

    ``"userProfile"``, ``"UserProfile"``, ``"user_profile"`` and
    ``"user-profile"`` all give ``["user", "Profile"]``-like word lists.
    """
    text = _ACRONYM_BOUNDARY.sub(r"\1 \2", value)
    text = _CASE_BOUNDARY.sub(r"\1 \2", text)
    return [word for word in _NON_ALNUM.split(text) if word]


def to_kebab_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    return "-".join(word.lower() for word in split_words(value))


def to_snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    return "_".join(word.lower() for word in split_words(value))


def to_pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(value))


def to_camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = to_pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


# ---------------------------------------------------------------------------
# Pluralization
# ---------------------------------------------------------------------------

_IRREGULAR: dict[str, str] = {
    "child": "children",
    "fez": "fezzes",
    "foot": "feet",
    "goose": "geese",
    "man": "men",
    "mouse": "mice",
    "ox": "oxen",
    "person": "people",
    "tooth": "teeth",
    "woman": "women",
}

_UNCOUNTABLE = frozenset(
    {
        "deer",
        "equipment",
        "feedback",
        "fish",
        "hardware",
        "information",
        "mail",
        "media",
        "metadata",
        "money",
        "music",
        "news",
        "personnel",
        "research",
        "rice",
        "series",
        "sheep",
        "species",
        "software",
        "staff",
        "traffic",
    }
)

# Ordered: the first matching rule wins.
_PLURAL_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(quiz)$"), r"\1zes"),
    (re.compile(r"(matr|vert|ind)(?:ix|ex)$"), r"\1ices"),
    (re.compile(r"(ss|sh|ch|x|z)$"), r"\1es"),
    (re.compile(r"([^aeiou]us|as)$"), r"\1es"),
    (re.compile(r"([^aeiou])is$"), r"\1es"),
    (re.compile(r"([^aeiouy]|qu)y$"), r"\1ies"),
    (re.compile(r"(?:([^f])fe|([lr])f)$"), r"\1\2ves"),
    (re.compile(r"(her|at|gr)o$"), r"\1oes"),
]

# A trailing ``s`` that none of the rules above claim marks a word that is
# already plural ("users").
_ALREADY_PLURAL = re.compile(r"[^s]s$")


def _pluralize_word(word: str) -> str:
    """Pluralize a single lower-case word."""
    if word in _UNCOUNTABLE:
        return word
    if word in _IRREGULAR:
        return _IRREGULAR[word]
    if word in _IRREGULAR.values():
        return word

    for pattern, replacement in _PLURAL_RULES:
        if pattern.search(word):
            return pattern.sub(replacement, word)

    if _ALREADY_PLURAL.search(word):
        return word
    return word + "s"


def _restore_case(source: str, plural: str) -> str:
    if source[:1].isupper():
        return plural[:1].upper() + plural[1:]
    return plural


def pluralize(value: str) -> str:
    """Pluralize the last word of *value*, keeping its casing.

    Works on any casing of a compound name::

        pluralize("sales-person")  # 'sales-people'
        pluralize("SalesPerson")   # 'SalesPeople'
        pluralize("category")      # 'categories'
    """
    match = _LAST_WORD.match(value)
    if match is None:
        # Ends in a digit or separator: fall back to a plain suffix.
        return value + "s" if value else value

    head, word = match.group("head"), match.group("word")
    plural = _pluralize_word(word.lower())
    return head + _restore_case(word, plural)
