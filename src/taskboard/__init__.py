"""Single-user task board: persisted tasks, derived boards, modal edit workflow."""

__version__ = "0.1.0"
