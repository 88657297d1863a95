#!/usr/bin/env python3
"""
Build GitHub Issue Form YAML

Renders template definition files to issue-form YAML, or runs an interactive
editing session that prints the document after every edit.

Examples:
    # Render a definition to stdout
    python scripts/build_issue_form.py render templates/bug_report.yaml

    # Render with custom presentation options into .github/ISSUE_TEMPLATE
    python scripts/build_issue_form.py render bug_report.yaml -c render.yaml -o .github/ISSUE_TEMPLATE/bug.yml

    # Start an interactive session (optionally seeded from a definition)
    python scripts/build_issue_form.py edit
    python scripts/build_issue_form.py edit --definition bug_report.yaml

    # List supported section types
    python scripts/build_issue_form.py sections
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
import yaml
from dotenv import load_dotenv
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from issueforge.contexts.editing import EditorSession, InvalidCommandError, parse_edit_command
from issueforge.contexts.editing.logger import setup_editing_logger
from issueforge.contexts.modeling import SectionType, TemplateModel, load_template_definition
from issueforge.contexts.serialization import load_render_config, serialize

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

# Errors a user can cause from the prompt; anything else is a bug and propagates
EDIT_ERRORS = (InvalidCommandError, ValueError, IndexError)
LOAD_ERRORS = (OSError, ValueError, yaml.YAMLError, OmegaConfBaseException)

SECTION_ATTRIBUTES = {
    SectionType.MARKDOWN: "value",
    SectionType.TEXTAREA: "label, description, value, required, multiple",
    SectionType.INPUT: "label, description, placeholder, value, required, multiple",
    SectionType.DROPDOWN: "label, description, options, required, multiple",
    SectionType.CHECKBOXES: "label, description, options (as {label: ...}), required, multiple",
}

EDIT_HELP = """Commands:
  set <field> <value...>                   name, title, description, labels, project, assignees
  add                                      append a blank Markdown section
  remove <index>                           delete a section
  update <index> key=value [key=value...]  type, label, description, placeholder,
                                           value, options=a,b, required, multiple
  show                                     print the document
  copy <path>                              write the document to a file
  quit                                     end the session"""


app = typer.Typer(
    help="Build GitHub issue form YAML from template definitions",
    add_completion=False,
)


def _start_log(mode: str) -> Path:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_dir = LOGS_PATH / f"{mode}_{timestamp}"
    return setup_editing_logger(log_dir, mode=mode, console=False)


def _fail(message: str) -> None:
    typer.secho(f"ERROR: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command("render")
def render_command(
    definition: Annotated[
        Path,
        typer.Argument(help="Template definition YAML"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the issue form here instead of stdout"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Render options override YAML"),
    ] = None,
):
    """
    Render a template definition to issue-form YAML.

    Examples:\n
        $ build_issue_form.py render bug_report.yaml

        $ build_issue_form.py render bug_report.yaml -o .github/ISSUE_TEMPLATE/bug.yml
    """
    _start_log("render")

    try:
        model = load_template_definition(definition)
        render_config = load_render_config(config)
    except LOAD_ERRORS as e:
        _fail(str(e))

    text = serialize(model, render_config)

    if output is None:
        typer.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.secho(f"Wrote {output}", fg=typer.colors.GREEN, err=True)


@app.command("edit")
def edit_command(
    definition: Annotated[
        Optional[Path],
        typer.Option("--definition", "-d", help="Seed the session from a template definition"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Render options override YAML"),
    ] = None,
):
    """
    Interactively edit a template, printing the issue form after every change.

    Examples:\n
        $ build_issue_form.py edit

        $ build_issue_form.py edit -d bug_report.yaml
    """
    log_file = _start_log("edit")

    try:
        model = load_template_definition(definition) if definition else TemplateModel()
        render_config = load_render_config(config)
    except LOAD_ERRORS as e:
        _fail(str(e))

    session = EditorSession(model=model, config=render_config)

    typer.secho(EDIT_HELP, dim=True)
    typer.secho(f"Log file: {log_file}\n", dim=True)
    typer.echo(session.document)

    while True:
        try:
            line = typer.prompt("edit", prompt_suffix="> ")
        except typer.Abort:
            break

        if line.strip().lower() in ("quit", "exit"):
            break

        try:
            command = parse_edit_command(line)
            result = session.apply(command)
        except EDIT_ERRORS as e:
            typer.secho(str(e), fg=typer.colors.RED, err=True)
            continue

        if result is not None:
            color = typer.colors.GREEN if result.success else typer.colors.RED
            typer.secho(result.message, fg=color)
        else:
            typer.echo(session.document)


@app.command("sections")
def sections_command():
    """List supported section types and the attributes each one emits."""
    for section_type in SectionType:
        typer.secho(section_type.value, bold=True)
        typer.echo(f"  {SECTION_ATTRIBUTES[section_type]}")


if __name__ == "__main__":
    app()
