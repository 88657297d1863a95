"""
Default values for issue form rendering.

Provides shared defaults used by:
- config_resolver.py (base layer that override files merge onto)
- yaml_renderer.py (fallback when no config is passed)
"""

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """
    Presentation options for the rendered YAML document.

    Attributes:
        line_width: Preferred maximum line width for folded scalars
        fold_threshold: Single-line strings longer than this render as folded blocks
        indent: Mapping indentation
        indent_sequences: Indent list items under their parent key
    """

    line_width: int = 80
    fold_threshold: int = 80
    indent: int = 2
    indent_sequences: bool = True


def get_default_render_config() -> RenderConfig:
    return RenderConfig()
