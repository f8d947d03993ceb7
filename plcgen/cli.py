"""plcgen CLI: generate Java from a serialized, analyzed PLC tree."""

from __future__ import annotations

import json
import os
import sys

from . import load
from .errors import GeneratorError, TreeFormatError
from .generator import generate


USAGE: str = """\
plcgen [OPTIONS] [INPUT] [-o OUTPUT]

Generate Java source from an analyzed PLC tree (JSON). Reads stdin when INPUT
is omitted and writes stdout when OUTPUT is omitted.

Options:
  -o, --output FILE   Write output to FILE instead of stdout
  --class-name NAME   Name of the generated top-level class (default: Main)
  --help              Show this help message
"""


def read_input(input_file: str | None) -> tuple[str, int]:
    """Read the tree text. Returns (text, exit_code) where exit_code 0 means OK."""
    if input_file is None:
        return (sys.stdin.read(), 0)
    try:
        with open(input_file, "rb") as f:
            raw = f.read()
    except FileNotFoundError:
        print("plcgen: " + input_file + ": No such file or directory", file=sys.stderr)
        return ("", 1)
    except OSError as e:
        print("plcgen: " + input_file + ": " + str(e), file=sys.stderr)
        return ("", 1)
    try:
        return (raw.decode("utf-8"), 0)
    except ValueError:
        print("plcgen: " + input_file + ": invalid utf-8", file=sys.stderr)
        return ("", 1)


class _Stdout:
    """stdout as a sink whose close() leaves the real stream open."""

    def write(self, text: str) -> int:
        return sys.stdout.write(text)

    def close(self) -> None:
        sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    input_file: str | None = None
    output_file: str | None = None
    class_name = "Main"
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "-o" or arg == "--output":
            if i + 1 >= len(args):
                print("plcgen: " + arg + " requires an argument", file=sys.stderr)
                return 2
            output_file = args[i + 1]
            i += 2
        elif arg == "--class-name":
            if i + 1 >= len(args):
                print("plcgen: --class-name requires an argument", file=sys.stderr)
                return 2
            class_name = args[i + 1]
            if not class_name.isidentifier():
                print("plcgen: invalid class name '" + class_name + "'", file=sys.stderr)
                return 2
            i += 2
        elif arg.startswith("-") and arg != "-":
            print("plcgen: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        elif input_file is None:
            input_file = None if arg == "-" else arg
            i += 1
        else:
            print("plcgen: unexpected argument '" + arg + "'", file=sys.stderr)
            return 2

    text, code = read_input(input_file)
    if code != 0:
        return code

    try:
        program = load(json.loads(text))
    except json.JSONDecodeError as e:
        print("plcgen: error: invalid JSON: " + str(e), file=sys.stderr)
        return 1
    except TreeFormatError as e:
        print("plcgen: error: " + str(e), file=sys.stderr)
        return 1

    if output_file is None:
        sink = _Stdout()
    else:
        try:
            sink = open(output_file, "w", encoding="utf-8")
        except OSError:
            print("plcgen: error: cannot write '" + output_file + "'", file=sys.stderr)
            return 1

    done = False
    try:
        generate(program, sink, class_name)
        done = True
    except GeneratorError as e:
        print("plcgen: generation error: " + str(e), file=sys.stderr)
        return 1
    finally:
        if not done and output_file is not None and os.path.exists(output_file):
            os.remove(output_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
