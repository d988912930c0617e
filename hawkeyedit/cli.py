"""Command line entry point for editing a node-graph file."""

from __future__ import annotations

import argparse
from enum import Enum

import yaml

from .editor import APPLICATION_NAME, Editor


class Severity(Enum):
    TRACE = "Trace"
    DEBUG = "Debug"
    INFO = "Info"
    WARN = "Warn"
    ERROR = "Error"
    FATAL = "Fatal"


def format_message(message: str, severity: Severity | str) -> str:
    """Prefix a message with its severity tag, e.g. ``[Info] ``."""
    return f"[{Severity(severity).value}] {message}"


def _log(message: str, severity: Severity) -> None:
    print(format_message(message, severity))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APPLICATION_NAME.lower(), description="Edit a render-graph YAML file."
    )
    parser.add_argument("file", nargs="?", default="testfile.yml", help="graph file")
    for kind in ("input", "output", "rasterized"):
        parser.add_argument(
            f"--add-{kind}",
            nargs=2,
            type=float,
            action="append",
            default=[],
            metavar=("X", "Y"),
            help=f"add an {kind} node at X Y",
        )
    parser.add_argument(
        "--connect",
        nargs=2,
        type=int,
        action="append",
        default=[],
        metavar=("PIN", "PIN"),
        help="link two pins",
    )
    parser.add_argument("--list", action="store_true", help="list nodes and their pins")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    editor = Editor(args.file)
    try:
        editor.load()
    except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError) as exc:
        _log(f"Could not load {args.file}: {exc}", Severity.FATAL)
        return 1

    for x, y in args.add_input:
        editor.add_input_node(x, y)
    for x, y in args.add_output:
        editor.add_output_node(x, y)
    for x, y in args.add_rasterized:
        editor.add_rasterized_node(x, y)

    for first, second in args.connect:
        try:
            link = editor.connect(first, second)
        except ValueError as exc:
            _log(str(exc), Severity.ERROR)
            return 1
        _log(f"Linked pin {first} to pin {second} as link {link.id}", Severity.INFO)

    if args.list:
        for node in editor.nodes:
            x, y = node.position
            inputs = " ".join(str(node.input_id(i)) for i in range(node.input_count))
            outputs = " ".join(str(node.output_id(i)) for i in range(node.output_count))
            print(f"{node.kind} {node.id_str} at ({x}, {y}) in: [{inputs}] out: [{outputs}]")

    try:
        editor.save()
    except OSError as exc:
        _log(f"Could not save {args.file}: {exc}", Severity.FATAL)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())