#!/usr/bin/env python3
"""
Main CLI entry point for the Large-Gap Gray Code tools
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from largegap import CodeBook, CodeBuilder, LGGCError, compute_all_statistics
from largegap.formats import (
    FORMATS, format_statistics, format_statistics_table, render, statistics_header, write_code
)


def _load_config(args):
    from config import LGGCConfig

    config = LGGCConfig(args.config) if args.config else LGGCConfig()
    errors = config.validate()
    if errors:
        raise LGGCError("Invalid configuration: " + "; ".join(errors))
    if not args.verbose:
        logging.getLogger().setLevel(str(config.logging.level).upper())
    return config


def _make_book(config) -> CodeBook:
    return CodeBook(CodeBuilder(config.builder.max_width, config.builder.search_max_width))


def _banner(title: str):
    print("#" * 68)
    print(f"#######  {title:<50}  #######")
    print("#" * 68)
    print()


def cmd_stats(args):
    """Print statistics for a range of canonical codes"""
    config = _load_config(args)
    min_width = args.min_width if args.min_width is not None else config.sweep.min_width
    max_width = args.max_width if args.max_width is not None else config.sweep.max_width

    builder = CodeBuilder(config.builder.max_width, config.builder.search_max_width)
    print(statistics_header())
    for stats in compute_all_statistics(min_width, max_width, builder):
        print(format_statistics(stats))
    return 0


def cmd_theorem1(args):
    """Build a Theorem 1 code and print its statistics"""
    config = _load_config(args)
    book = _make_book(config)
    code = book.create_code_from_theorem1(args.n, args.m, args.r, args.s)

    widths = args.width or [code.width]
    print(format_statistics_table(book.statistics(w) for w in widths), end='')
    return 0


def cmd_show(args):
    """Print the code of a given width"""
    config = _load_config(args)
    book = _make_book(config)
    print(render(book.get_code(args.width), args.format))
    return 0


def cmd_export(args):
    """Write the code of a given width to a file"""
    config = _load_config(args)
    book = _make_book(config)
    path = write_code(book.get_code(args.width), args.output, args.format)
    print(f"Wrote {args.width}-bit code to {path}")
    return 0


def cmd_demo(args):
    """Run the statistics, Theorem 1 and printing demonstration from a config"""
    config = _load_config(args)
    book = _make_book(config)

    _banner("1)  Statistics for all Large-Gap Gray Codes")
    print(format_statistics_table(book.all_statistics(config.sweep.min_width,
                                                      config.sweep.max_width)))

    if config.theorem1.parameters:
        _banner("2)  Statistics for Theorem 1 codes")
        print(statistics_header())
        for params in config.theorem1.parameters:
            code = book.create_code_from_theorem1(*params)
            print(format_statistics(book.statistics(code.width)))
        for width in config.theorem1.widths:
            print(format_statistics(book.statistics(width)))
        print()

    if config.output.show_width is not None:
        stats = book.statistics(config.output.show_width)
        _banner(f"3)  Generated {config.output.show_width}-bit code")
        print(f"MinGap = {stats.min_gap} and MaxGap = {stats.max_gap}")
        print()
        print(render(book.get_code(config.output.show_width), config.output.show_format))

    for export in config.output.exports:
        path = Path(config.output.directory) / export.filename
        write_code(book.get_code(export.width), path, export.format)
        print(f"Wrote {export.width}-bit code to {path}")
    return 0


def cmd_config(args):
    """Create, validate or summarize a configuration file"""
    from config import LGGCConfig, create_example_config

    if args.action == "create_example":
        config = create_example_config(args.output or "configs/example.yaml")
        print(config.summary())
        return 0

    if not args.config:
        print("Error: --config required", file=sys.stderr)
        return 1

    config = LGGCConfig(args.config)
    if args.action == "validate":
        errors = config.validate()
        if errors:
            print("Validation errors:")
            for error in errors:
                print(f"  - {error}")
            return 1
        print("Configuration is valid")
    else:
        print(config.summary())
    return 0


def cmd_plot(args):
    """Plot bit planes or the gap histogram of a code"""
    import matplotlib
    matplotlib.use("Agg")
    from largegap.visualization import GapVisualizer

    config = _load_config(args)
    book = _make_book(config)
    viz = GapVisualizer(style=args.style)
    code = book.get_code(args.width)
    if args.kind == "planes":
        viz.plot_bit_planes(code, title=args.title, save_path=args.output)
    else:
        viz.plot_gap_histogram(code, title=args.title, save_path=args.output)
    print(f"Saved plot to {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lggc",
        description="Large-Gap Gray Codes - Command Line Interface",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Statistics for widths 3-20
  %(prog)s stats

  # 16-bit code from Theorem 1, then report widths 16 and 13
  %(prog)s theorem1 14 2 3 1 --width 16 --width 13

  # Print the 7-bit code one bit per line
  %(prog)s show 7

  # Write the 13-bit code as a C array
  %(prog)s export 13 large_gap_gray_code_13bit.c --format c

  # Full demonstration driven by a config file
  %(prog)s demo --config configs/example.yaml
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version="Large-Gap Gray Codes v1.0.0"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_stats = subparsers.add_parser("stats", help="Statistics for a range of widths")
    parser_stats.add_argument("--min-width", type=int, help="Smallest width (default from config)")
    parser_stats.add_argument("--max-width", type=int, help="Largest width (default from config)")
    parser_stats.add_argument("--config", help="Path to config file")
    parser_stats.set_defaults(func=cmd_stats)

    parser_thm = subparsers.add_parser("theorem1", help="Build a code from Theorem 1 parameters")
    for name, text in (("n", "inner code width"), ("m", "outer code width"),
                       ("r", "inner steps per block (odd)"), ("s", "outer steps per block (odd)")):
        parser_thm.add_argument(name, type=int, help=text)
    parser_thm.add_argument("--width", type=int, action="append",
                            help="Width to report (repeatable, default n + m)")
    parser_thm.add_argument("--config", help="Path to config file")
    parser_thm.set_defaults(func=cmd_theorem1)

    parser_show = subparsers.add_parser("show", help="Print a code")
    parser_show.add_argument("width", type=int, help="Code width")
    parser_show.add_argument("--format", choices=sorted(FORMATS), default="horizontal",
                             help="Rendering")
    parser_show.add_argument("--config", help="Path to config file")
    parser_show.set_defaults(func=cmd_show)

    parser_export = subparsers.add_parser("export", help="Write a code to a file")
    parser_export.add_argument("width", type=int, help="Code width")
    parser_export.add_argument("output", help="Output file path")
    parser_export.add_argument("--format", choices=sorted(FORMATS), default="vertical",
                               help="Rendering")
    parser_export.add_argument("--config", help="Path to config file")
    parser_export.set_defaults(func=cmd_export)

    parser_demo = subparsers.add_parser("demo", help="Run the demonstration from a config")
    parser_demo.add_argument("--config", help="Path to config file")
    parser_demo.set_defaults(func=cmd_demo)

    parser_cfg = subparsers.add_parser("config", help="Configuration file helpers")
    parser_cfg.add_argument("action", choices=["validate", "summary", "create_example"],
                            help="Action to perform")
    parser_cfg.add_argument("-c", "--config", help="Path to config file")
    parser_cfg.add_argument("-o", "--output", help="Output path for create_example")
    parser_cfg.set_defaults(func=cmd_config)

    parser_plot = subparsers.add_parser("plot", help="Plot a code (needs matplotlib)")
    parser_plot.add_argument("width", type=int, help="Code width")
    parser_plot.add_argument("--kind", choices=["planes", "gaps"], default="planes",
                             help="Type of plot to generate")
    parser_plot.add_argument("--output", default="lggc.png", help="Output file path")
    parser_plot.add_argument("--style", choices=["publication", "presentation", "default"],
                             default="default", help="Plot style")
    parser_plot.add_argument("--title", help="Plot title (optional)")
    parser_plot.add_argument("--config", help="Path to config file")
    parser_plot.set_defaults(func=cmd_plot)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (LGGCError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Failed to write output: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
