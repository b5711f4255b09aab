# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.controller import BoardController, Command, CommandKind
from ..core.workflow import ModalState
from ..tasks.task_models import COLUMNS

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[BoardController, list[str], CommandEmitter | None], str]

logger = logging.getLogger(__name__)

FORM_KEYS = ("title", "description", "status", "board")
CLEAR_MARK = "-"


class CommandRegistry:
    """Slash-command registry used by the console (/help, /new, /board, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw: bool = False,
    ) -> None:
        """
        raw=True hands the handler the rest of the line as a single argument,
        with its inner whitespace untouched.
        """
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw:
            self._raw.update([key, *(a.lower() for a in aliases)])

    def handle(
        self,
        controller: BoardController,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].strip().split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if name in self._raw:
            args = [rest] if rest else []
        else:
            args = rest.split()

        return handler(controller, args, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_form_fields(text: str) -> dict[str, Any]:
    """
    Parse "title | description | status | board" into form fields.

    Each segment is trimmed at its ends only; spacing inside a value is kept.
    An empty segment is left out so the pre-filled form value is kept,
    and a lone "-" clears the field to "".
    """
    if not text.strip():
        return {}
    fields: dict[str, Any] = {}
    for key, segment in zip(FORM_KEYS, text.split("|")):
        val = segment.strip()
        if val == CLEAR_MARK:
            fields[key] = ""
        elif val:
            fields[key] = val
    return fields


def _run(controller: BoardController, kind: CommandKind, **payload: Any) -> None:
    controller.dispatch(Command(kind, payload))


def _modal_reply(controller: BoardController, ok_text: str) -> str:
    wf = controller.state.workflow
    if wf.error:
        return f"Not saved: {wf.error}"
    if wf.state is not ModalState.CLOSED:
        return f"Form still open ({wf.state})."
    return ok_text


def cmd_help(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_show(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    view = controller.refresh()
    return f"Showing {view.task_count()} task(s)."


def cmd_boards(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    view = controller.state.last_view or controller.refresh()
    if not view.boards:
        return "No boards yet. Use /new then /submit title | description | status | board."
    lines = ["Boards:"]
    for name in view.boards:
        marker = "*" if name == view.active_board else " "
        lines.append(f" {marker} {name}")
    return "\n".join(lines)


def cmd_board(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return "Usage: /board <name>"
    name = args[0]
    _run(controller, CommandKind.SELECT_BOARD, name=name)
    if controller.state.session.active_board != name:
        return f"No such board: {name}"
    return f"Active board: {name}"


def cmd_new(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    _run(controller, CommandKind.OPEN_ADD_MODAL)
    wf = controller.state.workflow
    if wf.state is not ModalState.ADD_OPEN:
        return f"Cannot open the add form now ({wf.state}). Use /cancel first."
    statuses = "/".join(s.value for s in COLUMNS)
    return (
        f"New task on board {wf.form.board or '(none)'}.\n"
        f"  /submit title | description | {statuses} [| board]"
    )


def cmd_submit(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    if controller.state.workflow.state is not ModalState.ADD_OPEN:
        return "No add form is open. Use /new first."
    _run(controller, CommandKind.SUBMIT_ADD_MODAL, fields=parse_form_fields(args[0] if args else ""))
    return _modal_reply(controller, "Task added.")


def cmd_open(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args or not args[0].isdigit():
        return "Usage: /open <task id>"
    _run(controller, CommandKind.OPEN_EDIT_MODAL, task_id=int(args[0]))
    wf = controller.state.workflow
    if wf.state is not ModalState.EDIT_OPEN:
        return f"Cannot edit task {args[0]}."
    f = wf.form
    return (
        f"Editing task {wf.editing_id}:\n"
        f"  title: {f.title}\n"
        f"  description: {f.description}\n"
        f"  status: {f.status}\n"
        "  /save title | description | status   (empty parts keep current values, - clears)\n"
        "  /delete to remove, /cancel to close"
    )


def cmd_save(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    if controller.state.workflow.state is not ModalState.EDIT_OPEN:
        return "No edit form is open. Use /open <id> first."
    _run(controller, CommandKind.SAVE_EDIT_MODAL, fields=parse_form_fields(args[0] if args else ""))
    return _modal_reply(controller, "Changes saved.")


def cmd_delete(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    if controller.state.workflow.state is not ModalState.EDIT_OPEN:
        return "No edit form is open. Use /open <id> first."
    _run(controller, CommandKind.DELETE_FROM_EDIT_MODAL)
    return _modal_reply(controller, "Task deleted.")


def cmd_cancel(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    if controller.state.workflow.state is ModalState.CLOSED:
        return "Nothing to cancel."
    _run(controller, CommandKind.CANCEL_MODAL)
    return "Form closed."


def cmd_sidebar(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /sidebar       -> toggle
    /sidebar on    -> show
    /sidebar off   -> hide
    """
    if not args:
        _run(controller, CommandKind.TOGGLE_SIDEBAR)
    else:
        arg = args[0].lower()
        if arg in ("on", "1", "true", "yes", "show"):
            _run(controller, CommandKind.TOGGLE_SIDEBAR, show=True)
        elif arg in ("off", "0", "false", "no", "hide"):
            _run(controller, CommandKind.TOGGLE_SIDEBAR, show=False)
        else:
            return "Usage: /sidebar on or /sidebar off."
    return f"Sidebar {'shown' if controller.state.session.show_sidebar else 'hidden'}."


def cmd_theme(controller: BoardController, args: list[str], emit: CommandEmitter | None = None) -> str:
    _run(controller, CommandKind.TOGGLE_THEME)
    return f"Theme: {'light' if controller.state.session.light_theme else 'dark'}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("show", cmd_show, help_text="Redraw the active board.", aliases=["ls"])
registry.register("boards", cmd_boards, help_text="List boards (* marks the active one).")
registry.register("board", cmd_board, help_text="Switch board: /board <name>.", raw=True)
registry.register("new", cmd_new, help_text="Open the add-task form.", aliases=["add"])
registry.register(
    "submit",
    cmd_submit,
    help_text="Submit the add form: /submit title | description | status [| board].",
    raw=True,
)
registry.register("open", cmd_open, help_text="Open a task for editing: /open <id>.", aliases=["edit"])
registry.register(
    "save",
    cmd_save,
    help_text="Save the edit form: /save title | description | status (empty keeps, - clears).",
    raw=True,
)
registry.register("delete", cmd_delete, help_text="Delete the task in the edit form.", aliases=["rm"])
registry.register("cancel", cmd_cancel, help_text="Close the open form without saving.")
registry.register("sidebar", cmd_sidebar, help_text="Show/hide the board list: /sidebar on | off.")
registry.register("theme", cmd_theme, help_text="Toggle light/dark theme.")
