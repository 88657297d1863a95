"""
Template definition loading.

Builds a TemplateModel from a YAML definition file. The definition uses the
model's own field names:

    name: Bug report
    title: "[Bug]: "
    labels: [bug, triage]
    sections:
      - type: Markdown
        value: Thanks for taking the time to fill out this bug report!
      - type: Input
        label: Contact details
        required: true

The model is assembled strictly through its public edit operations, the same
path an interactive editor takes.
"""

from pathlib import Path
from typing import Any, Dict

from omegaconf import OmegaConf

from issueforge.contexts.modeling.exceptions import InvalidDefinitionError
from issueforge.contexts.modeling.logger import _log_debug, _log_info
from issueforge.contexts.modeling.template_model import TemplateModel

# Section keys whose YAML values pass through untouched
TYPED_SECTION_FIELDS = ("type", "required", "multiple")
LIST_SECTION_FIELDS = ("label", "options")


def _as_text(value: Any) -> str:
    """Coerce a YAML scalar (int, float, bool, null) to the text the user typed."""
    if value is None:
        return ""
    return str(value)


def _as_text_list(value: Any) -> Any:
    """Coerce list entries to text; scalars are coerced and left for the model to shape."""
    if isinstance(value, list):
        return [_as_text(item) for item in value]
    return _as_text(value)


def _coerce_section(entry: Dict[str, Any]) -> Dict[str, Any]:
    coerced = {}
    for key, value in entry.items():
        if key in TYPED_SECTION_FIELDS:
            coerced[key] = value
        elif key in LIST_SECTION_FIELDS:
            coerced[key] = _as_text_list(value)
        else:
            coerced[key] = _as_text(value)
    return coerced


def model_from_dict(definition: Dict[str, Any], definition_path: Path = None) -> TemplateModel:
    """
    Build a TemplateModel from a plain definition mapping.

    Metadata keys are applied with set_metadata. When a sections list is present
    it replaces the default blank section; an empty list yields an empty body.

    Raises:
        InvalidDefinitionError: If the definition or a section entry is not a mapping
        UnknownFieldError: If a metadata or section key is not recognized
    """
    if not isinstance(definition, dict):
        raise InvalidDefinitionError(
            "Template definition must be a mapping", definition_path=definition_path
        )

    model = TemplateModel()

    for key, value in definition.items():
        if key == "sections":
            continue
        if key == "labels":
            value = [] if value is None else _as_text_list(value)
        else:
            value = _as_text(value)
        model.set_metadata(key, value)

    sections = definition.get("sections")
    if sections is None:
        return model

    if not isinstance(sections, list):
        raise InvalidDefinitionError(
            "'sections' must be a list", definition_path=definition_path
        )

    model.remove_section(0)
    for index, entry in enumerate(sections):
        if not isinstance(entry, dict):
            raise InvalidDefinitionError(
                "Section entry must be a mapping",
                definition_path=definition_path,
                section_index=index,
            )
        model.add_section()
        model.update_section(index, _coerce_section(entry))

    _log_debug(f"built model with {len(model.sections)} sections")
    return model


def load_template_definition(definition_path: Path) -> TemplateModel:
    """
    Load a YAML template definition file into a TemplateModel.

    Args:
        definition_path: Path to the definition YAML

    Returns:
        TemplateModel populated from the file
    """
    definition_path = Path(definition_path)
    definition = OmegaConf.to_container(OmegaConf.load(definition_path), resolve=True)

    _log_info(f"Loading template definition {definition_path.name}")
    return model_from_dict(definition, definition_path=definition_path)
