"""Delimiter-joined list fields.

Multi-valued text is stored as a single string. Tags and technology lists use
``", "``; bullet and feature lists use ``" • "``. No escaping is done, so an
item may never contain its own delimiter.
"""

from collections.abc import Iterable

from core.exceptions import InvalidDelimitedValueError

CSV_DELIMITER = ", "
BULLET_DELIMITER = " • "


def join_items(items: Iterable[str], delimiter: str) -> str:
    """Join list items into the stored string form.

    Items are stripped and blanks dropped. Raises InvalidDelimitedValueError
    if an item contains the delimiter, since it could not be split back.
    """
    cleaned: list[str] = []
    for item in items:
        value = item.strip()
        if not value:
            continue
        if delimiter in value:
            raise InvalidDelimitedValueError(value, delimiter)
        cleaned.append(value)
    return delimiter.join(cleaned)


def split_items(value: str | None, delimiter: str) -> list[str]:
    """Split a stored string back into its list items."""
    if not value:
        return []
    return value.split(delimiter)
