"""
Template Model -> Issue Form Serializer

Derives a GitHub issue-form document from a TemplateModel snapshot and renders
it to YAML. Every call is a fresh, read-only traversal of the model; nothing is
cached between calls, so output is always a pure function of current state.

Document shape:

    name: ""                      # always present
    title: ""                     # always present
    description: ""               # always present
    labels: [...]                 # only when non-empty
    project: ...                  # only when non-blank
    assignees: ...                # only when non-blank
    body:
      - type: markdown
        attributes: {value: ...}  # markdown has no id
      - type: dropdown
        id: dropdown-1            # position-derived
        attributes: {...}

Body blocks whose attributes end up empty are dropped, so a freshly added blank
section contributes nothing until one of its fields is filled in.
"""

from typing import Any, Dict, List, Optional

from issueforge.contexts.modeling.template_model import Section, SectionType, TemplateModel
from issueforge.contexts.serialization.defaults import RenderConfig
from issueforge.contexts.serialization.logger import log_document_built
from issueforge.contexts.serialization.yaml_renderer import render_yaml

OPTIONAL_METADATA_FIELDS = ("project", "assignees")


def section_id(type_name: str, index: int) -> str:
    """
    Build the position-derived id of a body block.

    Examples:
        section_id("Dropdown", 2)     # "dropdown-2"
        section_id("Date Picker", 0)  # "date-picker-0"
    """
    return f"{type_name.lower().replace(' ', '-')}-{index}"


def _first_label(label: Any) -> str:
    if isinstance(label, str):
        return label
    if label:
        return label[0]
    return ""


def build_attributes(section: Section) -> Dict[str, Any]:
    """
    Collect the populated attributes of a non-Markdown section.

    Type-irrelevant fields (placeholder outside Input, options outside
    Dropdown/Checkboxes, ...) are ignored even when set in memory.
    """
    section_type = section.type
    attributes: Dict[str, Any] = {}

    label = _first_label(section.label)
    if label:
        attributes["label"] = label

    if section.description:
        attributes["description"] = section.description

    if section.placeholder and section_type == SectionType.INPUT:
        attributes["placeholder"] = section.placeholder

    if section.value and section_type in (SectionType.INPUT, SectionType.TEXTAREA):
        attributes["value"] = section.value

    # Explicit assignment counts, so False is kept
    if section.required is not None:
        attributes["required"] = section.required

    if section.multiple is not None:
        attributes["multiple"] = section.multiple

    if section.options:
        if section_type == SectionType.DROPDOWN:
            attributes["options"] = list(section.options)
        elif section_type == SectionType.CHECKBOXES:
            attributes["options"] = [{"label": option} for option in section.options]

    return attributes


def build_block(section: Section, index: int) -> Dict[str, Any]:
    """Build the body block for the section at a given position (before filtering)."""
    type_name = section.type.value
    block: Dict[str, Any] = {"type": type_name.lower()}

    if section.type != SectionType.MARKDOWN:
        block["id"] = section_id(type_name, index)
        block["attributes"] = build_attributes(section)
    elif section.value:
        block["attributes"] = {"value": section.value}

    return block


def build_body(sections: List[Section]) -> List[Dict[str, Any]]:
    """Build body blocks in section order, dropping blocks with no attributes."""
    blocks = [build_block(section, index) for index, section in enumerate(sections)]
    return [block for block in blocks if block.get("attributes")]


def build_issue_form(model: TemplateModel) -> Dict[str, Any]:
    """
    Derive the issue-form structure from a model snapshot.

    Args:
        model: Template model to read (not modified)

    Returns:
        Ordered dict ready for rendering
    """
    document: Dict[str, Any] = {
        "name": model.name,
        "title": model.title,
        "description": model.description,
    }

    if model.labels:
        document["labels"] = list(model.labels)

    for key in OPTIONAL_METADATA_FIELDS:
        value = getattr(model, key)
        if value and value.strip():
            document[key] = value

    document["body"] = build_body(model.sections)
    return document


def serialize(model: TemplateModel, config: Optional[RenderConfig] = None) -> str:
    """
    Serialize a model to issue-form YAML text.

    Deterministic: two calls on an unmodified model return identical text.

    Args:
        model: Template model to serialize
        config: Render options (defaults when omitted)

    Returns:
        YAML document text
    """
    document = build_issue_form(model)
    text = render_yaml(document, config)
    log_document_built(len(model.sections), len(document["body"]), len(text))
    return text
