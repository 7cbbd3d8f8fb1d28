"""
Table naming conventions.

Derives a plural, lower-cased table name from an entity type name using an
ordered list of English pluralization rules. The first matching rule wins.
"""

import re
from functools import lru_cache
from typing import List, Pattern, Tuple

PLURAL_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(pattern, re.IGNORECASE), replacement)
    for pattern, replacement in (
        (r"(s)tatus$", r"\1tatuses"),
        (r"(quiz)$", r"\1zes"),
        (r"^(ox)$", r"\1en"),
        (r"([m|l])ouse$", r"\1ice"),
        (r"(matr|vert|ind)(ix|ex)$", r"\1ices"),
        (r"(x|ch|ss|sh)$", r"\1es"),
        (r"([^aeiouy]|qu)y$", r"\1ies"),
        (r"(hive)$", r"\1s"),
        (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
        (r"(shea|lea|loa|thie)f$", r"\1ves"),
        (r"sis$", "ses"),
        (r"([ti])um$", r"\1a"),
        (r"(tomato)$", r"\1es"),
        (r"(bu)s$", r"\1ses"),
        (r"(alias|status)$", r"\1es"),
        (r"(octop|vir)us$", r"\1i"),
        (r"(ax|test)is$", r"\1es"),
        (r"s$", "s"),
        (r"$", "s"),
    )
]


@lru_cache(maxsize=256)
def pluralize(word: str) -> str:
    """
    Pluralize and lower-case an entity name.

    Irregular nouns without a rule fall through to the plain "s" suffix.

    Examples:
        >>> pluralize("Status")
        'statuses'
        >>> pluralize("Category")
        'categories'
        >>> pluralize("Child")
        'childs'
    """
    for pattern, replacement in PLURAL_RULES:
        if pattern.search(word):
            return pattern.sub(replacement, word, count=1).lower()

    return f"{word.lower()}s"


class NamingResolver:
    """Resolves default table names for mapped entity types."""

    def resolve(self, type_name: str) -> str:
        # Qualified names ("pkg.models.User") resolve on their last segment
        return pluralize(type_name.rsplit(".", 1)[-1])

    def __call__(self, type_name: str) -> str:
        return self.resolve(type_name)
