"""Typed readers over an untyped processor configuration mapping.

Every reader removes the key it reads, so whatever is left afterwards was
not understood by the processor (see `check_no_unknown_properties`).
A value of ``None`` is treated the same as an absent key.
"""

from typing import Any, MutableMapping, Optional

from ingest_attachment.exceptions import (
    ConfigurationError,
    InvalidPropertyValueError,
    MissingRequiredFieldError,
    TypeMismatchError,
)


def type_name(value: Any) -> str:
    """Fully qualified name of the runtime type of `value`, e.g. ``builtins.str``."""
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}"


def _type_mismatch_message(expected: str, value: Any) -> str:
    return f"property isn't of type [{expected}], got [{type_name(value)}]"


def read_required_string(
    processor_type: str,
    processor_tag: Optional[str],
    configuration: MutableMapping[str, Any],
    property_name: str,
) -> str:
    value = configuration.pop(property_name, None)
    if value is None or value == "":
        raise MissingRequiredFieldError(
            "required property is missing",
            processor_type=processor_type,
            processor_tag=processor_tag,
            property_name=property_name,
        )
    if not isinstance(value, str):
        raise MissingRequiredFieldError(
            _type_mismatch_message("str", value),
            processor_type=processor_type,
            processor_tag=processor_tag,
            property_name=property_name,
            actual_type=type_name(value),
        )
    return value


def read_optional_string(
    processor_type: str,
    processor_tag: Optional[str],
    configuration: MutableMapping[str, Any],
    property_name: str,
    default: Optional[str] = None,
) -> Optional[str]:
    value = configuration.pop(property_name, None)
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeMismatchError(
            _type_mismatch_message("str", value),
            expected_type="str",
            actual_type=type_name(value),
            processor_type=processor_type,
            processor_tag=processor_tag,
            property_name=property_name,
        )
    return value


def read_optional_int(
    processor_type: str,
    processor_tag: Optional[str],
    configuration: MutableMapping[str, Any],
    property_name: str,
    default: Optional[int] = None,
    positive: bool = False,
) -> Optional[int]:
    """Read an integer property.

    ``bool`` values are rejected even though ``bool`` subclasses ``int``.
    With `positive` set, zero and negative values raise
    `InvalidPropertyValueError`.
    """
    value = configuration.pop(property_name, None)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(
            _type_mismatch_message("int", value),
            expected_type="int",
            actual_type=type_name(value),
            processor_type=processor_type,
            processor_tag=processor_tag,
            property_name=property_name,
        )
    if positive and value <= 0:
        raise InvalidPropertyValueError(
            f"property must be a positive integer, got [{value}]",
            value=value,
            processor_type=processor_type,
            processor_tag=processor_tag,
            property_name=property_name,
        )
    return value


def read_optional_list(
    processor_type: str,
    processor_tag: Optional[str],
    configuration: MutableMapping[str, Any],
    property_name: str,
) -> Optional[list]:
    """Read a list property; tuples are accepted and returned as lists."""
    value = configuration.pop(property_name, None)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise TypeMismatchError(
            f"property isn't a list, but of type [{type_name(value)}]",
            expected_type="list",
            actual_type=type_name(value),
            processor_type=processor_type,
            processor_tag=processor_tag,
            property_name=property_name,
        )
    return list(value)


def check_no_unknown_properties(
    processor_type: str,
    processor_tag: Optional[str],
    configuration: MutableMapping[str, Any],
) -> None:
    """Fail if any key was left unread by the processor factory."""
    if configuration:
        unknown = ", ".join(sorted(str(key) for key in configuration))
        raise ConfigurationError(
            f"processor [{processor_type}] doesn't support one or more provided configuration parameters [{unknown}]",
            processor_type=processor_type,
            processor_tag=processor_tag,
        )
