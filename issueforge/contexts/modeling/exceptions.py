"""Custom exceptions for the modeling context with field and section references."""

from pathlib import Path
from typing import Iterable, Optional


class UnknownFieldError(ValueError):
    """
    Exception raised when an edit names a field the model does not have.

    Attributes:
        message: Error description
        field_name: The field name that was rejected
        allowed: Field names that would have been accepted
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        allowed: Optional[Iterable[str]] = None,
    ):
        self.message = message
        self.field_name = field_name
        self.allowed = list(allowed) if allowed is not None else None

        parts = [message]

        if field_name is not None:
            parts.append(f"Field: {field_name}")

        if self.allowed:
            parts.append(f"Allowed: {', '.join(self.allowed)}")

        super().__init__("\n".join(parts))


class UnknownSectionTypeError(ValueError):
    """
    Exception raised when a section type is outside the supported closed set.

    Attributes:
        type_name: The rejected type name
        supported: Type names that would have been accepted
    """

    def __init__(self, type_name: str, supported: Iterable[str] = ()):
        self.type_name = type_name
        self.supported = list(supported)
        super().__init__(
            f"Unknown section type '{type_name}'. Supported: {', '.join(self.supported)}"
        )


class InvalidDefinitionError(ValueError):
    """
    Exception raised when a template definition file has the wrong shape.

    Attributes:
        message: Error description
        definition_path: Path of the offending definition file
        section_index: Position of the offending section entry, if any
    """

    def __init__(
        self,
        message: str,
        definition_path: Optional[Path] = None,
        section_index: Optional[int] = None,
    ):
        self.message = message
        self.definition_path = definition_path
        self.section_index = section_index

        parts = [message]

        if definition_path is not None:
            parts.append(f"Definition: {definition_path}")

        if section_index is not None:
            parts.append(f"Section index: {section_index}")

        super().__init__("\n".join(parts))
