"""
Issue Template Data Structures

Defines the mutable in-memory representation of an issue template being edited:
top-level metadata plus an ordered list of form sections.

The model knows nothing about serialization. Sections are a permissive superset
record: every field exists on every section, and changing a section's type never
clears fields that stop applying. The serializer decides what reaches the output.
"""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from issueforge.contexts.modeling.exceptions import UnknownFieldError, UnknownSectionTypeError
from issueforge.contexts.modeling.logger import _log_debug, _log_warning


class SectionType(str, Enum):
    """Closed set of issue-form field types a section can take."""

    MARKDOWN = "Markdown"
    TEXTAREA = "Textarea"
    INPUT = "Input"
    DROPDOWN = "Dropdown"
    CHECKBOXES = "Checkboxes"

    @classmethod
    def coerce(cls, value: Union["SectionType", str]) -> "SectionType":
        """Resolve a SectionType from itself or its name in any letter case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise UnknownSectionTypeError(str(value), supported=[member.value for member in cls])


@dataclass
class Section:
    """
    One body entry of the template.

    Attributes:
        type: Section variant
        label: Human-readable field title (a sequence is accepted; its first entry is used)
        description: Help text shown under the field
        placeholder: Hint text (meaningful for Input)
        value: Pre-filled content (Markdown, Textarea, Input)
        options: Choices (Dropdown, Checkboxes)
        required: None until explicitly assigned
        multiple: None until explicitly assigned
    """

    type: SectionType = SectionType.MARKDOWN
    label: Union[str, List[str]] = ""
    description: str = ""
    placeholder: str = ""
    value: str = ""
    options: List[str] = field(default_factory=list)
    required: Optional[bool] = None
    multiple: Optional[bool] = None


SECTION_FIELDS = tuple(f.name for f in dataclasses.fields(Section))

SCALAR_METADATA_FIELDS = ("name", "title", "description", "project", "assignees")
METADATA_FIELDS = SCALAR_METADATA_FIELDS + ("labels",)


def parse_labels(value: Union[str, Sequence[str]]) -> List[str]:
    """
    Normalize a labels value to a list.

    A single string is treated as a comma-separated tag field: "bug, triage"
    becomes ["bug", "triage"] and blank entries are dropped. Any other sequence
    is copied verbatim, order preserved.
    """
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return list(value)


def default_section() -> Section:
    return Section(type=SectionType.MARKDOWN, value="")


@dataclass
class TemplateModel:
    """
    In-progress issue template owned by a single editing session.

    Attributes:
        name: Template name (always emitted)
        title: Default issue title (always emitted)
        description: Template description (always emitted)
        labels: Labels applied to new issues, in order
        project: Optional project reference
        assignees: Optional assignees
        sections: Ordered form body; starts with one blank Markdown section
    """

    name: str = ""
    title: str = ""
    description: str = ""
    labels: List[str] = field(default_factory=list)
    project: str = ""
    assignees: str = ""
    sections: List[Section] = field(default_factory=lambda: [default_section()])

    def set_metadata(self, field_name: str, value: Any) -> None:
        """
        Replace one top-level metadata field.

        Values are not validated; empty strings are accepted.

        Args:
            field_name: One of name, title, description, project, assignees, labels
            value: New string value, or a sequence (or comma-separated string) for labels

        Raises:
            UnknownFieldError: If field_name is not a metadata field
        """
        if field_name not in METADATA_FIELDS:
            raise UnknownFieldError(
                "Cannot set unknown metadata field", field_name=field_name, allowed=METADATA_FIELDS
            )

        if field_name == "labels":
            value = parse_labels(value)

        setattr(self, field_name, value)
        _log_debug(f"set {field_name}={value!r}")

    def add_section(self) -> Section:
        """Append a blank Markdown section and return it."""
        section = default_section()
        self.sections.append(section)
        _log_debug(f"added section at index {len(self.sections) - 1}")
        return section

    def remove_section(self, index: int) -> None:
        """
        Delete the section at index. Later sections shift down by one.

        Out-of-range indices (negative included) leave the model untouched.
        """
        if not 0 <= index < len(self.sections):
            _log_warning(f"ignored removal of section {index} (have {len(self.sections)})")
            return

        removed = self.sections.pop(index)
        _log_debug(f"removed {removed.type.value} section at index {index}")

    def update_section(self, index: int, updates: Dict[str, Any]) -> Section:
        """
        Shallow-merge updates into the section at index.

        Only the named fields are replaced. Changing the type leaves all other
        fields in place, even those the new type does not use.

        Args:
            index: Position of the section to edit
            updates: Mapping of Section field names to new values

        Returns:
            The updated Section

        Raises:
            IndexError: If index does not address an existing section
            UnknownFieldError: If updates names a field Section does not have
            UnknownSectionTypeError: If updates carries an unsupported type
        """
        if not 0 <= index < len(self.sections):
            raise IndexError(f"section index {index} out of range (have {len(self.sections)})")

        unknown = [key for key in updates if key not in SECTION_FIELDS]
        if unknown:
            raise UnknownFieldError(
                "Cannot update unknown section field", field_name=unknown[0], allowed=SECTION_FIELDS
            )

        changes = dict(updates)
        if "type" in changes:
            changes["type"] = SectionType.coerce(changes["type"])
        if "options" in changes:
            options = changes["options"]
            if isinstance(options, str):
                options = [options] if options else []
            changes["options"] = list(options)

        self.sections[index] = dataclasses.replace(self.sections[index], **changes)
        _log_debug(f"updated section {index}: {sorted(changes)}")
        return self.sections[index]
