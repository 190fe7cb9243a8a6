from tick.core.errors import ValidationError


def validate_content(content: str | None, what: str = "name") -> str:
    """Validate that content is not empty or whitespace-only.

    Raises ValidationError if invalid, otherwise returns content unchanged.
    """
    if not isinstance(content, str) or not content.strip():
        raise ValidationError(f"{what} cannot be empty or whitespace-only")
    return content


def join_words(words: list[str] | None) -> str:
    """Join variadic CLI words back into a single label."""
    return " ".join(words) if words else ""
