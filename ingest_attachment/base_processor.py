from abc import ABC, abstractmethod
from typing import Optional

from ingest_attachment.logging import get_logger
from ingest_attachment.model.document import IngestDocument


class Processor(ABC):
    """abstract base class for all ingest processors."""

    TYPE: str = ""

    def __init__(self, tag: Optional[str] = None, name: Optional[str] = None):
        """initialize the processor.

        Args:
            tag: Optional identifier from the pipeline definition, used for tracing.
            name: Optional name for the processor (used for logging).
        """
        self._tag = tag
        self.logger = get_logger(name or self.__class__.__name__)

    @property
    def tag(self) -> Optional[str]:
        return self._tag

    @property
    def type(self) -> str:
        return self.TYPE

    @abstractmethod
    def execute(self, document: IngestDocument) -> IngestDocument:
        """Execute the processor on one document.

        Args:
            document: Document to process, modified in place.

        Returns:
            The processed document.
        """
        pass

    def __call__(self, document: IngestDocument) -> IngestDocument:
        """shortway of calling `execute` method."""
        return self.execute(document)
