"""Generator diagnostics."""

from __future__ import annotations


class GeneratorError(Exception):
    """Contract violation in the input tree; generation stops at the first one."""

    def __init__(self, msg: str, node: object | None = None):
        self.msg: str = msg
        self.node: object | None = node
        if node is None:
            super().__init__(msg)
        else:
            super().__init__(msg + " in " + type(node).__name__)


class TreeFormatError(ValueError):
    """Malformed serialized tree."""

    def __init__(self, msg: str, path: str = ""):
        self.msg: str = msg
        self.path: str = path
        if path == "":
            super().__init__(msg)
        else:
            super().__init__(msg + " at " + path)
