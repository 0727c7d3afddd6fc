"""Helpers for interpolating document content into generated SQL.

Also used as Jinja2 filters when rendering the pre-import instructions.
"""


def sql_escape(value: str | None) -> str:
    """Escape backslashes and single quotes for a MySQL string literal.

    Args:
        value: Raw text taken from the document

    Returns:
        Text safe to place between single quotes

    Examples:
        >>> sql_escape("O'Brien's Study")
        "O\\\\'Brien\\\\'s Study"
    """
    if not value:
        return ""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def sql_literal(value: str | None) -> str:
    """Quote a value as a single-quoted SQL string literal.

    Examples:
        >>> sql_literal("Article")
        "'Article'"
    """
    return f"'{sql_escape(value)}'"


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "sql_escape": sql_escape,
    "sql_literal": sql_literal,
}
