"""PLC Java generator: public API."""

from __future__ import annotations

from .ast import Program as Program
from .errors import GeneratorError as GeneratorError, TreeFormatError as TreeFormatError
from .generator import Generator as Generator, generate as generate, to_source as to_source
from .serialize import from_dict as from_dict, to_dict as to_dict


def load(data: dict[str, object]) -> Program:
    """Build a Program from its serialized dict form."""
    node = from_dict(data)
    if not isinstance(node, Program):
        raise TreeFormatError("expected a Program, got " + type(node).__name__)
    return node


def emit(data: dict[str, object], class_name: str = "Main") -> str:
    """Render a serialized Program as Java source text."""
    return to_source(load(data), class_name)
