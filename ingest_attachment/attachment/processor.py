"""
Attachment processor: extracts text and metadata from binary document fields.
"""

from dataclasses import dataclass
from typing import Any, FrozenSet, MutableMapping, Optional

from ingest_attachment.attachment.extractor import AttachmentResult, ExtractorBase, PlainTextExtractor
from ingest_attachment.attachment.fields import DEFAULT_FIELDS, Field
from ingest_attachment.base_processor import Processor
from ingest_attachment.config_utils import (
    read_optional_int,
    read_optional_list,
    read_optional_string,
    read_required_string,
)
from ingest_attachment.exceptions import AttachmentParseError, InvalidEnumValueError
from ingest_attachment.logging import get_logger
from ingest_attachment.model.document import IngestDocument

TAG_KEY = "tag"
DEFAULT_TARGET_FIELD = "attachment"
DEFAULT_INDEXED_CHARS = 100_000


@dataclass(frozen=True)
class ProcessorConfig:
    """Validated, immutable settings of an attachment processor."""

    source_field: str
    target_field: str = DEFAULT_TARGET_FIELD
    indexed_chars: int = DEFAULT_INDEXED_CHARS
    fields: FrozenSet[Field] = DEFAULT_FIELDS
    tag: Optional[str] = None


class AttachmentProcessor(Processor):
    """
    Runs the extraction collaborator on the bytes found at `source_field` and
    stores the selected fields of its result under `target_field`.
    """

    TYPE = "attachment"

    def __init__(self, config: ProcessorConfig, extractor: ExtractorBase):
        super().__init__(tag=config.tag)
        self._config = config
        self._extractor = extractor

    @property
    def config(self) -> ProcessorConfig:
        return self._config

    @property
    def source_field(self) -> str:
        return self._config.source_field

    @property
    def target_field(self) -> str:
        return self._config.target_field

    @property
    def indexed_chars(self) -> int:
        return self._config.indexed_chars

    @property
    def fields(self) -> FrozenSet[Field]:
        return self._config.fields

    @property
    def extractor(self) -> ExtractorBase:
        return self._extractor

    def _select_fields(self, result: AttachmentResult) -> dict[str, Any]:
        """Keep the non-empty values of the configured fields, keyed by field name.

        `content` is stripped, but a `content_length` derived from the
        content is measured before stripping.
        """
        fields = self.fields
        selected: dict[str, Any] = {}
        content = result.content.strip() if result.content else ""

        if Field.CONTENT in fields and content:
            selected[Field.CONTENT.value] = content

        for field, value in (
            (Field.LANGUAGE, result.language),
            (Field.DATE, result.date),
            (Field.TITLE, result.title),
            (Field.NAME, result.name),
            (Field.AUTHOR, result.author),
            (Field.KEYWORDS, result.keywords),
            (Field.CONTENT_TYPE, result.content_type),
        ):
            if field in fields and value:
                selected[field.value] = value

        if Field.CONTENT_LENGTH in fields:
            if result.content_length is not None:
                selected[Field.CONTENT_LENGTH.value] = result.content_length
            elif result.content:
                selected[Field.CONTENT_LENGTH.value] = len(result.content)

        return selected

    def execute(self, document: IngestDocument) -> IngestDocument:
        data = document.get_field_value(self.source_field, (bytes, bytearray, memoryview))

        try:
            result = self._extractor.extract(bytes(data), self.indexed_chars)
        except Exception as e:
            self.logger.error(f"Failed to extract attachment from field [{self.source_field}]: {e}")
            raise AttachmentParseError(self.source_field) from e

        extracted = self._select_fields(result)
        document.set_field_value(self.target_field, extracted)
        self.logger.debug(f"Extracted {sorted(extracted)} from [{self.source_field}] into [{self.target_field}]")
        return document

    def __repr__(self) -> str:
        return (
            f"AttachmentProcessor(tag={self.tag!r}, source_field={self.source_field!r}, "
            f"target_field={self.target_field!r}, indexed_chars={self.indexed_chars})"
        )


class AttachmentProcessorFactory:
    """Builds `AttachmentProcessor` instances from processor definitions."""

    DEFAULT_FIELDS = DEFAULT_FIELDS

    def __init__(self, extractor: Optional[ExtractorBase] = None):
        """
        Args:
            extractor: Collaborator handed to every processor created.
                Defaults to a `PlainTextExtractor`.
        """
        self.extractor = extractor or PlainTextExtractor()
        self.logger = get_logger(self.__class__.__name__)

    def create(
        self,
        config: MutableMapping[str, Any],
        tag: Optional[str] = None,
    ) -> AttachmentProcessor:
        """Validate a processor definition and build the processor.

        Keys read from `config` are removed from it, including ``"tag"``.
        The definition's tag is used only when `tag` is not given.

        Args:
            config: Processor definition, e.g. decoded from JSON or YAML.
            tag: Optional processor tag.

        Returns:
            Configured AttachmentProcessor.

        Raises:
            ConfigurationError: On the first invalid or missing property.
        """
        processor_type = AttachmentProcessor.TYPE
        definition_tag = config.pop(TAG_KEY, None)
        if tag is None:
            tag = definition_tag

        source_field = read_required_string(processor_type, tag, config, "source_field")
        target_field = read_optional_string(processor_type, tag, config, "target_field", DEFAULT_TARGET_FIELD)
        indexed_chars = read_optional_int(
            processor_type, tag, config, "indexed_chars", DEFAULT_INDEXED_CHARS, positive=True
        )
        field_names = read_optional_list(processor_type, tag, config, "fields")

        if field_names is None:
            fields = self.DEFAULT_FIELDS
        else:
            resolved = set()
            for field_name in field_names:
                try:
                    resolved.add(Field.parse(field_name))
                except ValueError:
                    raise InvalidEnumValueError(
                        f"illegal field option [{field_name}]. valid values are {Field.valid_values()}",
                        value=field_name,
                        processor_type=processor_type,
                        processor_tag=tag,
                        property_name="fields",
                    ) from None
            fields = frozenset(resolved)

        processor_config = ProcessorConfig(
            source_field=source_field,
            target_field=target_field,
            indexed_chars=indexed_chars,
            fields=fields,
            tag=tag,
        )
        self.logger.debug(f"Created {processor_type} processor [{tag}] reading [{source_field}]")
        return AttachmentProcessor(processor_config, self.extractor)
