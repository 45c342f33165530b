"""todo-lists: single-user task lists with local JSON persistence."""

__version__ = "0.1.0"
