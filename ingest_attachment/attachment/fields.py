"""Metadata kinds the attachment processor can extract."""

from enum import Enum
from typing import Any


class Field(Enum):
    """Extractable attachment properties.

    The value of each member is the token used both in processor
    configuration and as the key in the extracted output. Declaration order
    is the order reported in error messages.
    """
    CONTENT = "content"
    TITLE = "title"
    NAME = "name"
    AUTHOR = "author"
    KEYWORDS = "keywords"
    DATE = "date"
    CONTENT_TYPE = "content_type"
    CONTENT_LENGTH = "content_length"
    LANGUAGE = "language"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: Any) -> "Field":
        """Resolve a configuration token such as ``"content_type"``.

        Only the exact lowercase names are accepted. Members of the enum
        itself are returned unchanged.

        Raises:
            ValueError: If `token` does not name a field.
        """
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            for member in cls:
                if member.value == token:
                    return member
        raise ValueError(f"illegal field option [{token}]")

    @classmethod
    def canonical_names(cls) -> list[str]:
        return [member.name for member in cls]

    @classmethod
    def valid_values(cls) -> str:
        """Canonical names rendered as ``[CONTENT, TITLE, ...]``."""
        return "[" + ", ".join(cls.canonical_names()) + "]"


# shared by every processor configured without an explicit field list
DEFAULT_FIELDS: frozenset[Field] = frozenset(Field)
