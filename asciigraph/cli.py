"""Command-line entry point: graph two columns of a CSV file."""

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd
from pydantic import ValidationError

from .config import ENV_VARS_HELP, LOG_LEVELS, Settings, get_settings
from .engine import ChartEngine
from .exceptions import GraphError
from .models import Custom, Dataset, GraphConfig, GraphType, MinToMax, ZeroToMax

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciigraph",
        description="Render a column of numbers from a CSV file as an ASCII graph",
        epilog=ENV_VARS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("csv", help="CSV file to read, or - for standard input")
    parser.add_argument("--label-column", "-l", default=None,
                        help="Column holding the labels (default: first column)")
    parser.add_argument("--value-column", "-v", default=None,
                        help="Column holding the values (default: second column)")
    parser.add_argument("--colour-column", default=None,
                        help="Optional column holding a colour name per row")
    parser.add_argument("--type", "-t", dest="graph_type", default=GraphType.BAR.value,
                        choices=[GraphType.BAR.value, GraphType.SCATTER.value],
                        help="Graph type")
    parser.add_argument("--width", type=int, default=None, help="Maximum width in columns")
    parser.add_argument("--height", type=int, default=None, help="Maximum height in rows")
    parser.add_argument("--symbol", default=None, help="Plotting symbol")
    parser.add_argument("--y-range", choices=["min-to-max", "zero-to-max", "custom"], default=None,
                        help="Y axis range style")
    parser.add_argument("--lower", type=float, default=None, help="Lower bound for --y-range custom")
    parser.add_argument("--upper", type=float, default=None, help="Upper bound for --y-range custom")
    parser.add_argument("--title", default=None, help="Title printed above the graph")
    parser.add_argument("--no-colour", action="store_true", help="Do not colour plot symbols")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                        help="Logging level (default from ASCIIGRAPH_LOG_LEVEL)")
    return parser


def _build_config(parser: argparse.ArgumentParser, args: argparse.Namespace, settings: Settings) -> GraphConfig:
    """Apply command-line overrides on top of the settings' graph configuration."""
    config = settings.to_graph_config()
    if args.width is not None:
        config = config.with_max_width(args.width)
    if args.height is not None:
        config = config.with_max_height(args.height)
    if args.symbol is not None:
        config = config.with_plot_symbol(args.symbol)

    bounds_given = args.lower is not None or args.upper is not None
    if bounds_given and args.y_range not in (None, "custom"):
        parser.error(f"--lower and --upper only apply to --y-range custom, not {args.y_range}")
    if args.y_range == "min-to-max":
        config = config.with_y_range(MinToMax())
    elif args.y_range == "zero-to-max":
        config = config.with_y_range(ZeroToMax())
    elif args.y_range == "custom" or bounds_given:
        if args.lower is None or args.upper is None:
            parser.error("a custom y range requires both --lower and --upper")
        config = config.with_y_range(Custom(args.lower, args.upper))
    return config


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(map(str, detail['loc'])) or 'value'}: {detail['msg']}" for detail in error.errors()
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid ASCIIGRAPH_* setting: {_describe(e)}", file=sys.stderr)
        return 1

    logging.basicConfig(level=args.log_level or settings.log_level,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    settings.log_configuration()

    try:
        config = _build_config(parser, args, settings)
    except ValidationError as e:
        parser.error(f"invalid graph option: {_describe(e)}")

    source = sys.stdin if args.csv == "-" else args.csv
    logger.info(f"Reading {args.csv}")
    try:
        df = pd.read_csv(source)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        print(f"Error reading {args.csv}: {e}", file=sys.stderr)
        return 1

    columns = list(df.columns)
    label_column = args.label_column or (columns[0] if columns else None)
    value_column = args.value_column or (columns[1] if len(columns) > 1 else None)
    if label_column is None or value_column is None:
        print("Error: the CSV needs a label column and a value column", file=sys.stderr)
        return 1

    engine = ChartEngine(enable_colour=settings.enable_colour and not args.no_colour)
    try:
        dataset = Dataset.from_dataframe(df, label_column, value_column,
                                         colour_column=args.colour_column, title=args.title)
        engine.render(dataset, config, args.graph_type)
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
