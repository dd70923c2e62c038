"""
Command line interface

Usage:
    gridforge export design.json --target basalt -o ui.lua
    gridforge import ui.lua -o design.json
    gridforge export design.json --target xml -o layout.xml
    gridforge presets
"""

import argparse
import sys
from pathlib import Path

from gridforge.core import GridforgeError, LogContext, configure_logging, create_container, get_logger, get_settings
from gridforge.core.validate import INTERCHANGE_TARGETS
from gridforge.dialect import Dialect
from gridforge.document import CANVAS_PRESETS
from gridforge.handlers import DesignHandler

logger = get_logger(__name__)

STDIO = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridforge", description="Terminal UI design converter")
    commands = parser.add_subparsers(dest="command", required=True)

    export = commands.add_parser("export", help="Render a design as source or interchange text")
    export.add_argument("input", help="Design or source file ('-' for stdin)")
    export.add_argument(
        "-t",
        "--target",
        required=True,
        choices=[d.value for d in Dialect] + list(INTERCHANGE_TARGETS),
        help="Output dialect or interchange format",
    )
    export.add_argument("-o", "--output", default=STDIO, help="Output file ('-' for stdout)")
    export.add_argument("--no-comments", action="store_true", help="Omit per-widget comment lines")
    export.add_argument("--name", help="Project name for project output")

    load = commands.add_parser("import", help="Read source or a design file into interchange JSON")
    load.add_argument("input", help="Design or source file ('-' for stdin)")
    load.add_argument("-d", "--dialect", choices=[d.value for d in Dialect], help="Skip format detection")
    load.add_argument("-o", "--output", default=STDIO, help="Output file ('-' for stdout)")

    commands.add_parser("presets", help="List canvas presets")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)

    if args.command == "presets":
        for name, (width, height) in CANVAS_PRESETS.items():
            print(f"{name:12s} {width}x{height}")
        return 0

    handler = create_container(settings).get(DesignHandler)
    try:
        with LogContext(command=args.command, input=args.input):
            source = _read(args.input)
            handler.load(source, getattr(args, "dialect", None), filename=args.input)
            if args.command == "export":
                if args.name:
                    handler.name = args.name
                text = handler.export(args.target, include_comments=False if args.no_comments else None)
            else:
                text = handler.export("json")
    except (GridforgeError, OSError) as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    _write(args.output, text)
    return 0


def _read(path: str) -> str:
    if path == STDIO:
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _write(path: str, text: str) -> None:
    if path == STDIO:
        sys.stdout.write(text)
    else:
        Path(path).write_text(text, encoding="utf-8")


if __name__ == "__main__":
    sys.exit(main())
