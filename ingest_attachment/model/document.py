"""Document object that ingest processors read from and write to."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Type, Union

from ingest_attachment.exceptions import DocumentFieldError


@dataclass
class IngestDocument:
    """
    A document travelling through an ingest pipeline.

    Fields are addressed with dotted paths, so ``"file.data"`` refers to
    ``source["file"]["data"]``. Path segments are only resolved through
    nested dicts.
    """

    source: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _split_path(path: str) -> list[str]:
        if not path:
            raise DocumentFieldError("path cannot be null nor empty")
        return path.split(".")

    def _resolve_parent(self, path: str) -> Tuple[Dict[str, Any], str]:
        """Return the dict holding the last segment of `path`, and that segment."""
        keys = self._split_path(path)
        context: Any = self.source
        for key in keys[:-1]:
            if not isinstance(context, dict) or key not in context:
                raise DocumentFieldError(f"field [{key}] not present as part of path [{path}]")
            context = context[key]
        if not isinstance(context, dict):
            raise DocumentFieldError(
                f"cannot resolve [{keys[-1]}] from object of type [{type(context).__name__}] as part of path [{path}]"
            )
        return context, keys[-1]

    def has_field(self, path: str) -> bool:
        try:
            parent, leaf = self._resolve_parent(path)
        except DocumentFieldError:
            return False
        return leaf in parent

    def get_field_value(
        self,
        path: str,
        expected_type: Optional[Union[Type, Tuple[Type, ...]]] = None,
    ) -> Any:
        """Get the value at `path`.

        Args:
            path: Dotted field path.
            expected_type: If given, the value must be an instance of it.

        Raises:
            DocumentFieldError: If the path is missing or the value has an
                unexpected type.
        """
        parent, leaf = self._resolve_parent(path)
        if leaf not in parent:
            raise DocumentFieldError(f"field [{leaf}] not present as part of path [{path}]")
        value = parent[leaf]
        if expected_type is not None and not isinstance(value, expected_type):
            raise DocumentFieldError(
                f"field [{path}] of type [{type(value).__name__}] cannot be cast to [{_type_label(expected_type)}]"
            )
        return value

    def set_field_value(self, path: str, value: Any) -> None:
        """Set `value` at `path`, creating missing intermediate objects."""
        keys = self._split_path(path)
        context = self.source
        for key in keys[:-1]:
            if key not in context:
                context[key] = {}
            elif not isinstance(context[key], dict):
                raise DocumentFieldError(
                    f"cannot set [{keys[-1]}] with parent object of type [{type(context[key]).__name__}] as part of path [{path}]"
                )
            context = context[key]
        context[keys[-1]] = value

    def remove_field(self, path: str) -> Any:
        """Remove the field at `path` and return its value."""
        parent, leaf = self._resolve_parent(path)
        if leaf not in parent:
            raise DocumentFieldError(f"field [{leaf}] not present as part of path [{path}]")
        return parent.pop(leaf)

    def __repr__(self) -> str:
        return f"IngestDocument(source_keys={list(self.source.keys())}, metadata_keys={list(self.metadata.keys())})"


def _type_label(expected_type: Union[Type, Tuple[Type, ...]]) -> str:
    if isinstance(expected_type, tuple):
        return " | ".join(t.__name__ for t in expected_type)
    return expected_type.__name__
