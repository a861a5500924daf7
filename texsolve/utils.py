"""Small string helpers."""


def trim_trailing(end: str, text: str) -> str:
    """Remove every trailing ``end`` character, then at most one trailing dot."""
    if len(end) != 1:
        raise ValueError("end must be a single character")
    text = text.rstrip(end)
    return text.removesuffix(".")