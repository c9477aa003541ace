"""Ingest Attachment - configure and run attachment extraction processors for ingest pipelines."""

__version__ = "0.1.0"

from ingest_attachment.attachment.fields import DEFAULT_FIELDS, Field
from ingest_attachment.attachment.processor import (
    AttachmentProcessor,
    AttachmentProcessorFactory,
    ProcessorConfig,
)
from ingest_attachment.model.document import IngestDocument

__all__ = [
    "AttachmentProcessor",
    "AttachmentProcessorFactory",
    "DEFAULT_FIELDS",
    "Field",
    "IngestDocument",
    "ProcessorConfig",
]
