"""
Edit command parsing.

Turns one line of editor input into an EditCommand. Each mutating command maps
to exactly one template model operation.

Grammar:
    set <field> <value...>                   set_metadata
    add                                      add_section
    remove <index>                           remove_section
    update <index> key=value [key=value...]  update_section
    show                                     print the current document
    copy <path>                              hand the document to a file sink

Values may be quoted; a literal "\\n" inside a quoted value becomes a line break.
In update, options=a,b,c is split on commas and required/multiple take
true/false/yes/no/1/0.
"""

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from issueforge.contexts.editing.exceptions import InvalidCommandError

MUTATING_ACTIONS = ("set", "add", "remove", "update")
ACTIONS = MUTATING_ACTIONS + ("show", "copy")

BOOLEAN_WORDS = {
    "true": True,
    "yes": True,
    "1": True,
    "false": False,
    "no": False,
    "0": False,
}
BOOLEAN_FIELDS = ("required", "multiple")
LIST_FIELDS = ("options",)


@dataclass
class EditCommand:
    """
    One parsed editor command.

    Attributes:
        action: One of ACTIONS
        field_name: Metadata field for "set"
        value: New value for "set"
        index: Section position for "remove" and "update"
        updates: Section field changes for "update"
        target: Destination for "copy"
    """

    action: str
    field_name: Optional[str] = None
    value: Any = None
    index: Optional[int] = None
    updates: Dict[str, Any] = field(default_factory=dict)
    target: Optional[Path] = None

    @property
    def is_mutation(self) -> bool:
        return self.action in MUTATING_ACTIONS


def _unescape(text: str) -> str:
    return text.replace("\\n", "\n")


def _parse_index(token: str, line: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidCommandError(f"Section index must be an integer, got '{token}'", line=line)


def _parse_update_value(key: str, raw: str, line: str) -> Any:
    if key in BOOLEAN_FIELDS:
        word = raw.strip().lower()
        if word not in BOOLEAN_WORDS:
            raise InvalidCommandError(f"'{key}' expects true or false, got '{raw}'", line=line)
        return BOOLEAN_WORDS[word]

    if key in LIST_FIELDS:
        return [_unescape(part.strip()) for part in raw.split(",") if part.strip()]

    return _unescape(raw)


def parse_edit_command(line: str) -> EditCommand:
    """
    Parse one editor input line.

    Args:
        line: Raw input line

    Returns:
        EditCommand for the line

    Raises:
        InvalidCommandError: If the line is empty, names an unknown action,
                             or has missing/malformed arguments

    Examples:
        parse_edit_command('set title "[Bug]: "')
        parse_edit_command("update 1 type=Dropdown options=a,b required=true")
    """
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        raise InvalidCommandError(f"Could not tokenize command ({e})", line=line)

    if not tokens:
        raise InvalidCommandError("Empty command", line=line)

    action, args = tokens[0].lower(), tokens[1:]
    if action not in ACTIONS:
        raise InvalidCommandError(
            f"Unknown command '{action}'. Available: {', '.join(ACTIONS)}", line=line
        )

    if action == "set":
        if not args:
            raise InvalidCommandError("Usage: set <field> <value...>", line=line)
        return EditCommand(
            action="set", field_name=args[0], value=_unescape(" ".join(args[1:]))
        )

    if action == "remove":
        if len(args) != 1:
            raise InvalidCommandError("Usage: remove <index>", line=line)
        return EditCommand(action="remove", index=_parse_index(args[0], line))

    if action == "update":
        if len(args) < 2:
            raise InvalidCommandError("Usage: update <index> key=value [key=value ...]", line=line)
        updates = {}
        for pair in args[1:]:
            key, sep, raw = pair.partition("=")
            if not sep or not key:
                raise InvalidCommandError(f"Expected key=value, got '{pair}'", line=line)
            updates[key] = _parse_update_value(key, raw, line)
        return EditCommand(action="update", index=_parse_index(args[0], line), updates=updates)

    if action == "copy":
        if len(args) != 1:
            raise InvalidCommandError("Usage: copy <path>", line=line)
        return EditCommand(action="copy", target=Path(args[0]))

    if args:
        raise InvalidCommandError(f"'{action}' takes no arguments", line=line)
    return EditCommand(action=action)
