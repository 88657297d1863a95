"""
Editor Session

Owns one TemplateModel for the lifetime of an editing session. Every mutation
goes through the session, which immediately re-derives the document text with
serialize(); there is no dependency tracking, the document is simply recomputed.

Copying hands the current text to an external sink (clipboard, file, ...). A
failing sink is reported back as a CopyResult and logged; model state and
further editing are unaffected.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from issueforge.contexts.editing.commands import EditCommand
from issueforge.contexts.editing.logger import _log_debug, _log_error, _log_success
from issueforge.contexts.modeling.template_model import TemplateModel
from issueforge.contexts.serialization.defaults import RenderConfig
from issueforge.contexts.serialization.issue_form import serialize

# How long the "copied" acknowledgment stays up
COPY_ACK_SECONDS = 2.0


@dataclass
class CopyResult:
    """Result from EditorSession.copy()."""

    success: bool
    text: str
    message: str
    error: Optional[str] = None


def file_sink(path: Path) -> Callable[[str], None]:
    """Build a copy sink that writes the document to a file."""

    def _write(text: str) -> None:
        Path(path).write_text(text, encoding="utf-8")

    return _write


class EditorSession:
    """
    Single-threaded editing session over one template model.

    Example:
        session = EditorSession()
        session.set_metadata("title", "Bug")
        session.update_section(0, {"type": "Input", "label": "Email", "required": True})
        print(session.document)
    """

    def __init__(
        self,
        model: Optional[TemplateModel] = None,
        config: Optional[RenderConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.model = model if model is not None else TemplateModel()
        self.config = config
        self._clock = clock
        self._copied_at: Optional[float] = None
        self.document = serialize(self.model, self.config)

    def _refresh(self) -> str:
        self.document = serialize(self.model, self.config)
        return self.document

    # Model operations

    def set_metadata(self, field_name: str, value: Any) -> str:
        self.model.set_metadata(field_name, value)
        return self._refresh()

    def add_section(self) -> str:
        self.model.add_section()
        return self._refresh()

    def remove_section(self, index: int) -> str:
        self.model.remove_section(index)
        return self._refresh()

    def update_section(self, index: int, updates: Dict[str, Any]) -> str:
        self.model.update_section(index, updates)
        return self._refresh()

    def apply(self, command: EditCommand) -> Optional[CopyResult]:
        """
        Execute one parsed command.

        Mutations update the model and the document. "copy" writes the document
        to command.target and returns the CopyResult. "show" is a no-op here;
        displaying the document is the caller's job.
        """
        _log_debug(f"apply {command.action}")

        if command.action == "set":
            self.set_metadata(command.field_name, command.value)
        elif command.action == "add":
            self.add_section()
        elif command.action == "remove":
            self.remove_section(command.index)
        elif command.action == "update":
            self.update_section(command.index, command.updates)
        elif command.action == "copy":
            return self.copy(file_sink(command.target))
        return None

    # Copy boundary

    def copy(self, sink: Callable[[str], None]) -> CopyResult:
        """
        Hand the current document text to an external sink.

        The text is the snapshot current at call time. On success the copied
        acknowledgment is raised for COPY_ACK_SECONDS.

        Args:
            sink: Callable receiving the document text

        Returns:
            CopyResult describing the outcome (failures are not raised)
        """
        text = self.document
        try:
            sink(text)
        except Exception as e:
            _log_error(f"copy failed: {e}")
            return CopyResult(
                success=False, text=text, message=f"Could not copy document: {e}", error=str(e)
            )

        self._copied_at = self._clock()
        _log_success(f"copied document ({len(text)} chars)")
        return CopyResult(success=True, text=text, message="Copied")

    @property
    def copied(self) -> bool:
        """True while the copy acknowledgment is showing."""
        if self._copied_at is None:
            return False
        return self._clock() - self._copied_at < COPY_ACK_SECONDS
