"""
Modeling Context

Responsibilities:
- Holds the in-progress issue template (metadata + ordered sections)
- Applies discrete field-level edits (set metadata, add/remove/update sections)
- Loads template definition files into a model

Owns: Template model state and its mutation operations
Never: Knows how the model is serialized
"""

from issueforge.contexts.modeling.definition_loader import (
    load_template_definition,
    model_from_dict,
)
from issueforge.contexts.modeling.exceptions import (
    InvalidDefinitionError,
    UnknownFieldError,
    UnknownSectionTypeError,
)
from issueforge.contexts.modeling.template_model import (
    METADATA_FIELDS,
    SECTION_FIELDS,
    Section,
    SectionType,
    TemplateModel,
    parse_labels,
)

__all__ = [
    # Data structures
    "TemplateModel",
    "Section",
    "SectionType",
    "METADATA_FIELDS",
    "SECTION_FIELDS",
    "parse_labels",
    # Definition loading
    "load_template_definition",
    "model_from_dict",
    # Exceptions
    "InvalidDefinitionError",
    "UnknownFieldError",
    "UnknownSectionTypeError",
]
