from ingest_attachment.attachment.extractor import AttachmentResult, ExtractorBase, PlainTextExtractor
from ingest_attachment.attachment.fields import DEFAULT_FIELDS, Field
from ingest_attachment.attachment.processor import (
    DEFAULT_INDEXED_CHARS,
    DEFAULT_TARGET_FIELD,
    AttachmentProcessor,
    AttachmentProcessorFactory,
    ProcessorConfig,
)

__all__ = [
    "AttachmentProcessor",
    "AttachmentProcessorFactory",
    "AttachmentResult",
    "DEFAULT_FIELDS",
    "DEFAULT_INDEXED_CHARS",
    "DEFAULT_TARGET_FIELD",
    "ExtractorBase",
    "Field",
    "PlainTextExtractor",
    "ProcessorConfig",
]
