"""
Exceptions raised while configuring and running ingest processors.

Configuration errors are raised at definition-parse time and carry the
processor type, tag and offending property so that pipeline authors can
locate the problem. Their message text is stable and is matched verbatim
by callers.
"""

from typing import Any, Optional


class IngestAttachmentError(Exception):
    """Base exception for all ingest-attachment errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(IngestAttachmentError):
    """A processor definition could not be turned into a processor."""

    def __init__(
        self,
        message: str,
        processor_type: Optional[str] = None,
        processor_tag: Optional[str] = None,
        property_name: Optional[str] = None,
        **details: Any,
    ) -> None:
        """
        Args:
            message: Reason, without the property prefix.
            processor_type: Type name of the processor being configured.
            processor_tag: Tag of the processor being configured, if any.
            property_name: Configuration key the error refers to.
            **details: Extra structured information for diagnostics.
        """
        if property_name:
            message = f"[{property_name}] {message}"
        super().__init__(
            message,
            {
                "processor_type": processor_type,
                "processor_tag": processor_tag,
                "property_name": property_name,
                **details,
            },
        )
        self.processor_type = processor_type
        self.processor_tag = processor_tag
        self.property_name = property_name


class MissingRequiredFieldError(ConfigurationError):
    """A required property is absent, empty or unusable."""


class TypeMismatchError(ConfigurationError):
    """A property is present but holds a value of the wrong type."""

    def __init__(self, message: str, expected_type: str, actual_type: str, **kwargs: Any) -> None:
        super().__init__(message, expected_type=expected_type, actual_type=actual_type, **kwargs)
        self.expected_type = expected_type
        self.actual_type = actual_type


class InvalidEnumValueError(ConfigurationError):
    """A property value is not one of the allowed options."""

    def __init__(self, message: str, value: Any, **kwargs: Any) -> None:
        super().__init__(message, value=value, **kwargs)
        self.value = value


class InvalidPropertyValueError(ConfigurationError):
    """A property has the right type but an unacceptable value."""

    def __init__(self, message: str, value: Any, **kwargs: Any) -> None:
        super().__init__(message, value=value, **kwargs)
        self.value = value


class DocumentFieldError(IngestAttachmentError):
    """A field path of an ingest document cannot be read or written."""


class AttachmentParseError(IngestAttachmentError):
    """The extraction collaborator failed on a document."""

    def __init__(self, source_field: str) -> None:
        super().__init__(
            f"Error parsing document in field [{source_field}]",
            {"source_field": source_field},
        )
        self.source_field = source_field
