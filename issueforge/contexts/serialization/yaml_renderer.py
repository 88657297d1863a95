"""
YAML rendering for issue form documents.

Dumps an already-built document structure with PyYAML, keeping key order and
choosing block scalar styles for long text:

- Multi-line strings render as literal blocks (|)
- Single-line strings longer than fold_threshold render as folded blocks (>)
- Empty strings render as "" so empty metadata stays visibly present
- Sequences are indented under their parent key (configurable)

PyYAML falls back to a quoted style by itself whenever a block style cannot
represent the string exactly (e.g. trailing spaces before a line break).
"""

from typing import Any, Dict, Optional

import yaml

from issueforge.contexts.serialization.defaults import RenderConfig, get_default_render_config


class IssueFormDumper(yaml.SafeDumper):
    """SafeDumper with block-style long strings and optionally indented sequences."""

    fold_threshold = 80
    indent_sequences = True

    def increase_indent(self, flow=False, indentless=False):
        if self.indent_sequences:
            indentless = False
        return super().increase_indent(flow, indentless)


def _represent_str(dumper: IssueFormDumper, data: str) -> yaml.ScalarNode:
    if data == "":
        style = '"'
    elif "\n" in data:
        style = "|"
    elif len(data) > dumper.fold_threshold:
        style = ">"
    else:
        style = None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


IssueFormDumper.add_representer(str, _represent_str)


def _dumper_for(config: RenderConfig) -> type:
    return type(
        "ConfiguredIssueFormDumper",
        (IssueFormDumper,),
        {
            "fold_threshold": config.fold_threshold,
            "indent_sequences": config.indent_sequences,
        },
    )


def render_yaml(data: Dict[str, Any], config: Optional[RenderConfig] = None) -> str:
    """
    Render a document structure to YAML text.

    Args:
        data: Document structure (plain dicts, lists, strings, booleans)
        config: Render options (defaults when omitted)

    Returns:
        YAML text ending in a newline
    """
    if config is None:
        config = get_default_render_config()

    return yaml.dump(
        data,
        Dumper=_dumper_for(config),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        indent=config.indent,
        width=config.line_width,
    )
