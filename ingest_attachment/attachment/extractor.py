"""
Boundary to the library that turns raw attachment bytes into text and metadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ingest_attachment.logging import get_logger


@dataclass(frozen=True)
class AttachmentResult:
    """Text and metadata extracted from one attachment.

    Every attribute is optional; extractors leave unknown values as None.
    """

    content: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None
    author: Optional[str] = None
    keywords: Optional[str] = None
    content_type: Optional[str] = None
    content_length: Optional[int] = None
    language: Optional[str] = None
    date: Optional[str] = None


class ExtractorBase(ABC):
    """
    Abstract base class for attachment extractors.
    """

    def __init__(self, debug: bool = False):
        """
        Initialize the extractor.

        Args:
            debug: Enable debug logging for detailed extraction information
        """
        self.debug = debug
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def extract(self, content: bytes, max_chars: int) -> AttachmentResult:
        """
        Extract text and metadata from raw attachment bytes.

        Args:
            content: Raw attachment bytes
            max_chars: Maximum number of characters of text to return

        Returns:
            AttachmentResult with whatever could be extracted
        """
        pass


class PlainTextExtractor(ExtractorBase):
    """Extractor for attachments that are plain text in a common encoding."""

    def __init__(self, encodings: Optional[list[str]] = None, debug: bool = False):
        """
        Args:
            encodings: Encodings tried in order. latin-1 decodes any byte
                sequence, so keeping it last makes decoding total.
            debug: Enable debug logging
        """
        super().__init__(debug=debug)
        self.encodings = encodings or ["utf-8", "latin-1"]

    def _decode(self, content: bytes) -> tuple[str, str]:
        for encoding in self.encodings:
            try:
                return content.decode(encoding), encoding
            except UnicodeDecodeError:
                continue
        raise ValueError(f"Content could not be decoded with any of {self.encodings}")

    def extract(self, content: bytes, max_chars: int) -> AttachmentResult:
        text, encoding = self._decode(bytes(content))
        if len(text) > max_chars:
            if self.debug:
                self.logger.debug(f"Truncating {len(text)} characters to {max_chars}")
            text = text[:max_chars]

        return AttachmentResult(
            content=text,
            content_type=f"text/plain; charset={encoding.upper()}",
            content_length=len(text),
        )
