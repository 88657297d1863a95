"""Unit tests for edit command parsing."""

from pathlib import Path

import pytest

from issueforge.contexts.editing import InvalidCommandError, parse_edit_command


@pytest.mark.unit
def test_parse_set_joins_words():
    """Test set joins the remaining words into one value."""
    command = parse_edit_command("set title Crash on save")

    assert command.action == "set"
    assert command.field_name == "title"
    assert command.value == "Crash on save"
    assert command.is_mutation


@pytest.mark.unit
def test_parse_set_quoted_value():
    """Test quoted values keep surrounding spaces and brackets."""
    command = parse_edit_command('set title "[Bug]: "')

    assert command.value == "[Bug]: "


@pytest.mark.unit
def test_parse_set_empty_value():
    """Test set without a value clears the field."""
    assert parse_edit_command("set project").value == ""


@pytest.mark.unit
def test_parse_set_line_breaks():
    """Test \\n inside a quoted value becomes a line break."""
    command = parse_edit_command(r'set description "first\nsecond"')

    assert command.value == "first\nsecond"


@pytest.mark.unit
def test_parse_add_and_show():
    """Test argument-less commands."""
    assert parse_edit_command("add").action == "add"
    show = parse_edit_command("SHOW")
    assert show.action == "show"
    assert not show.is_mutation


@pytest.mark.unit
def test_parse_remove():
    """Test remove parses its index."""
    assert parse_edit_command("remove 2").index == 2


@pytest.mark.unit
def test_parse_update_values():
    """Test update converts options and booleans."""
    command = parse_edit_command(
        'update 1 type=Checkboxes "label=Code of Conduct" options=Agree,Disagree required=yes'
    )

    assert command.index == 1
    assert command.updates == {
        "type": "Checkboxes",
        "label": "Code of Conduct",
        "options": ["Agree", "Disagree"],
        "required": True,
    }


@pytest.mark.unit
def test_parse_update_value_with_equals():
    """Test only the first = separates key from value."""
    command = parse_edit_command("update 0 value=a=b")

    assert command.updates == {"value": "a=b"}


@pytest.mark.unit
def test_parse_copy():
    """Test copy parses its target path."""
    assert parse_edit_command("copy out/form.yml").target == Path("out/form.yml")


@pytest.mark.unit
@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "undo",
        "set",
        "remove",
        "remove first",
        "remove 1 2",
        "update 0",
        "update 0 required",
        "update 0 required=maybe",
        "update x value=1",
        "copy",
        "add 1",
        'set title "unterminated',
    ],
)
def test_invalid_commands(line):
    """Test malformed lines raise InvalidCommandError."""
    with pytest.raises(InvalidCommandError):
        parse_edit_command(line)
