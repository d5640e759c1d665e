"""Logic for normalizing tag values to lists and text."""


def as_list(v: object) -> list[str]:
    """Return a tag value as a list of strings, preserving order."""
    if v is None:
        return []
    if isinstance(v, list):
        return [str(x) for x in v]
    return [str(v)]


def first_value(v: object) -> str | None:
    """Return the first value of a possibly repeated tag."""
    values = as_list(v)
    return values[0] if values else None


def as_text(v: object) -> str:
    """Return a tag value as one string, repeated values joined by newlines."""
    return "\n".join(s.strip() for s in as_list(v) if s.strip())
