"""
Editing Context

Responsibilities:
- Parses discrete edit commands from the user-facing layer
- Applies each command as one template model operation
- Keeps the serialized document current after every mutation
- Hands the document to copy sinks and tracks the transient "copied" state

Owns: Editing session lifecycle, command grammar, copy acknowledgment
Never: Decides what the serialized document contains
"""

from issueforge.contexts.editing.commands import EditCommand, parse_edit_command
from issueforge.contexts.editing.exceptions import InvalidCommandError
from issueforge.contexts.editing.session import (
    COPY_ACK_SECONDS,
    CopyResult,
    EditorSession,
    file_sink,
)

__all__ = [
    "EditorSession",
    "CopyResult",
    "COPY_ACK_SECONDS",
    "file_sink",
    "EditCommand",
    "parse_edit_command",
    "InvalidCommandError",
]
