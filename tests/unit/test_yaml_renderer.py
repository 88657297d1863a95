"""Unit tests for YAML rendering of issue form documents."""

import pytest
import yaml

from issueforge.contexts.serialization import RenderConfig, render_yaml

LONG_SENTENCE = " ".join(["Please describe what you expected to happen instead."] * 3)


@pytest.mark.unit
def test_empty_strings_double_quoted():
    """Test empty strings render as "" rather than ''."""
    assert render_yaml({"name": ""}) == 'name: ""\n'


@pytest.mark.unit
def test_key_order_preserved():
    """Test keys are not sorted."""
    text = render_yaml({"title": "t", "name": "n", "body": []})

    assert text.splitlines() == ["title: t", "name: n", "body: []"]


@pytest.mark.unit
def test_sequences_indented_under_key():
    """Test list items are indented beneath their parent key."""
    text = render_yaml({"labels": ["bug", "triage"]})

    assert text == "labels:\n  - bug\n  - triage\n"


@pytest.mark.unit
def test_sequences_indentless_when_disabled():
    """Test indent_sequences=False restores PyYAML's indentless lists."""
    text = render_yaml({"labels": ["bug"]}, RenderConfig(indent_sequences=False))

    assert text == "labels:\n- bug\n"


@pytest.mark.unit
def test_multiline_string_literal_block():
    """Test multi-line values use literal block style and load back unchanged."""
    value = "## Steps\n1. Open the app\n2. Click save"
    text = render_yaml({"value": value})

    assert text.startswith("value: |-\n")
    assert yaml.safe_load(text)["value"] == value


@pytest.mark.unit
def test_long_string_folded_block():
    """Test long single-line values use folded block style and load back unchanged."""
    text = render_yaml({"description": LONG_SENTENCE})

    assert text.startswith("description: >-\n")
    assert yaml.safe_load(text)["description"] == LONG_SENTENCE


@pytest.mark.unit
def test_fold_threshold_configurable():
    """Test raising the threshold keeps long values on one line."""
    text = render_yaml({"description": LONG_SENTENCE}, RenderConfig(fold_threshold=500, line_width=500))

    assert text == f"description: {LONG_SENTENCE}\n"


@pytest.mark.unit
def test_short_string_plain():
    """Test short values stay plain scalars."""
    assert render_yaml({"title": "Bug report"}) == "title: Bug report\n"


@pytest.mark.unit
def test_ambiguous_strings_stay_strings():
    """Test strings that look like other YAML types survive a reload."""
    data = {"options": ["yes", "1.0", "null", "[Bug]: "]}

    assert yaml.safe_load(render_yaml(data)) == data


@pytest.mark.unit
def test_booleans_render_lowercase():
    """Test booleans render as true/false."""
    assert render_yaml({"required": True, "multiple": False}) == "required: true\nmultiple: false\n"


@pytest.mark.unit
def test_default_dumper_untouched():
    """Test the custom representer does not leak into yaml.safe_dump."""
    assert yaml.safe_dump({"name": ""}) == "name: ''\n"
