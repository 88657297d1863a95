"""
Serialization Context

Responsibilities:
- Derives the issue-form document structure from a template model snapshot
- Applies omission rules, type-specific attribute shaping and position-derived ids
- Renders the structure to YAML with block-style long strings

Owns: Model -> document transformation, YAML presentation options
Never: Mutates the template model
"""

from issueforge.contexts.serialization.config_resolver import load_render_config
from issueforge.contexts.serialization.defaults import RenderConfig
from issueforge.contexts.serialization.issue_form import (
    build_attributes,
    build_block,
    build_body,
    build_issue_form,
    section_id,
    serialize,
)
from issueforge.contexts.serialization.yaml_renderer import render_yaml

__all__ = [
    # Document derivation
    "serialize",
    "build_issue_form",
    "build_body",
    "build_block",
    "build_attributes",
    "section_id",
    # Rendering
    "render_yaml",
    "RenderConfig",
    "load_render_config",
]
