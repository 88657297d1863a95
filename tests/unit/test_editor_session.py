"""Unit tests for EditorSession."""

import pytest
import yaml

from issueforge.contexts.editing import (
    COPY_ACK_SECONDS,
    EditorSession,
    parse_edit_command,
)
from issueforge.contexts.serialization import RenderConfig, serialize


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.mark.unit
def test_initial_document():
    """Test a new session starts with the fresh-model document."""
    session = EditorSession()

    assert yaml.safe_load(session.document) == {
        "name": "",
        "title": "",
        "description": "",
        "body": [],
    }


@pytest.mark.unit
def test_document_recomputed_after_each_mutation():
    """Test every mutation refreshes the document."""
    session = EditorSession()

    session.set_metadata("title", "Bug")
    assert "title: Bug" in session.document

    session.update_section(0, {"value": "Thanks!"})
    assert yaml.safe_load(session.document)["body"] == [
        {"type": "markdown", "attributes": {"value": "Thanks!"}}
    ]

    session.add_section()
    session.update_section(1, {"type": "Input", "label": "Email"})
    session.remove_section(0)
    assert yaml.safe_load(session.document)["body"] == [
        {"type": "input", "id": "input-0", "attributes": {"label": "Email"}}
    ]

    assert session.document == serialize(session.model)


@pytest.mark.unit
def test_session_uses_render_config():
    """Test the session renders with its configuration."""
    session = EditorSession(config=RenderConfig(indent_sequences=False))

    session.set_metadata("labels", ["bug"])

    assert "labels:\n- bug\n" in session.document


@pytest.mark.unit
def test_apply_commands():
    """Test parsed commands drive the matching model operations."""
    session = EditorSession()

    for line in [
        "set name Bug report",
        "set labels bug, triage",
        "update 0 type=Dropdown label=Browser options=Firefox,Chrome multiple=true",
        "add",
        "update 1 type=Textarea label=Logs",
    ]:
        assert session.apply(parse_edit_command(line)) is None

    document = yaml.safe_load(session.document)
    assert document["name"] == "Bug report"
    assert document["labels"] == ["bug", "triage"]
    assert document["body"] == [
        {
            "type": "dropdown",
            "id": "dropdown-0",
            "attributes": {"label": "Browser", "multiple": True, "options": ["Firefox", "Chrome"]},
        },
        {"type": "textarea", "id": "textarea-1", "attributes": {"label": "Logs"}},
    ]


@pytest.mark.unit
def test_copy_success_sets_acknowledgment():
    """Test a successful copy delivers the text and raises the copied flag briefly."""
    clock = FakeClock()
    session = EditorSession(clock=clock)
    session.set_metadata("title", "Bug")
    received = []

    result = session.copy(received.append)

    assert result.success
    assert received == [session.document]
    assert session.copied

    clock.now += COPY_ACK_SECONDS - 0.1
    assert session.copied

    clock.now += 0.2
    assert not session.copied


@pytest.mark.unit
def test_copy_reflects_snapshot_at_call_time():
    """Test later edits do not change what was already copied."""
    session = EditorSession()
    session.set_metadata("title", "First")
    received = []

    session.copy(received.append)
    session.set_metadata("title", "Second")

    assert "First" in received[0]
    assert "Second" in session.document


@pytest.mark.unit
def test_copy_failure_is_reported_not_raised():
    """Test sink failures become a failed result and leave the model untouched."""
    session = EditorSession()
    session.set_metadata("title", "Bug")

    def denied(text):
        raise PermissionError("clipboard access denied")

    result = session.copy(denied)

    assert not result.success
    assert "clipboard access denied" in result.message
    assert result.error == "clipboard access denied"
    assert not session.copied
    assert session.model.title == "Bug"

    session.set_metadata("title", "Still editable")
    assert "Still editable" in session.document


@pytest.mark.unit
def test_copy_command_writes_file(tmp_path):
    """Test the copy command writes the document to its target."""
    session = EditorSession()
    session.set_metadata("title", "Bug")
    target = tmp_path / "bug.yml"

    result = session.apply(parse_edit_command(f"copy {target}"))

    assert result.success
    assert target.read_text(encoding="utf-8") == session.document


@pytest.mark.unit
def test_copy_command_to_missing_directory(tmp_path):
    """Test a copy into a missing directory fails gracefully."""
    session = EditorSession()
    target = tmp_path / "missing" / "bug.yml"

    result = session.apply(parse_edit_command(f"copy {target}"))

    assert not result.success
    assert not target.exists()
