from __future__ import annotations

import argparse
import sys

from rich.console import Console
from rich.table import Table

from .config import CliConfig
from .convert import CONVERTERS, convert
from .logger import logger
from .styles import CaseStyle
from .tokens import tokenize


def _style_arg(raw: str) -> CaseStyle:
    try:
        return CaseStyle.parse(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def cmd_convert(args, config: CliConfig):
    style = args.to or config.default_style
    logger.debug("Converting %d value(s) to %s", len(args.values), style.value)
    for value in args.values:
        print(convert(value, style))


def cmd_split(args, config: CliConfig):
    split_on_dot = args.dot or config.split_on_dot
    for value in args.values:
        print(" ".join(tokenize(value, split_on_dot=split_on_dot)))


def cmd_table(args, config: CliConfig):
    table = Table(title="casekit")
    table.add_column("input")
    for style in CaseStyle:
        table.add_column(style.value)
    for value in args.values:
        table.add_row(value, *(CONVERTERS[style](value) for style in CaseStyle))
    Console().print(table)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="casekit",
        description="Convert identifiers between camelCase, kebab-case, dot.case and friends",
    )
    sub = p.add_subparsers(dest="cmd", required=True)
    p_c = sub.add_parser("convert", help="Convert values to one case style")
    p_c.add_argument(
        "--to",
        type=_style_arg,
        default=None,
        help=(
            "Target style: "
            + ", ".join(s.value for s in CaseStyle)
            + " (default: $CASEKIT_DEFAULT_STYLE or kebab)"
        ),
    )
    p_c.add_argument("values", nargs="+")
    p_c.set_defaults(func=cmd_convert)
    p_s = sub.add_parser("split", help="Print the word segments of each value")
    p_s.add_argument(
        "--dot",
        action="store_true",
        help="Treat '.' as a delimiter (default: $CASEKIT_SPLIT_ON_DOT)",
    )
    p_s.add_argument("values", nargs="+")
    p_s.set_defaults(func=cmd_split)
    p_t = sub.add_parser("table", help="Show every case style for each value")
    p_t.add_argument("values", nargs="+")
    p_t.set_defaults(func=cmd_table)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = CliConfig.from_env()
    except ValueError:
        return 2
    args.func(args, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
