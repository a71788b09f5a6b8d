"""
Color an NX by NY rectangular grid and write it as a VTK unstructured grid.

The VTK document goes to stdout (or --output), color statistics to stderr.
"""

import argparse
import logging
import sys
import time
from importlib.metadata import PackageNotFoundError, version

from latcolor._display import usage_str
from latcolor.coloring import color_bfs
from latcolor.graph import INDEX_MAX, IndexOverflowError, build_lattice_graph
from latcolor.vtk import DEFAULT_TITLE, _check_title, write_vtk

logger = logging.getLogger("latcolor")

EXIT_USAGE = 1
EXIT_CONFIG = 2


def _package_version() -> str:
    try:
        return version("latcolor")
    except PackageNotFoundError:
        return "unknown"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="latcolor",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100x200 grid to a file, statistics on stderr
  latcolor --nx=100 --ny=200 -o grid.vtk

  # Same, without statistics
  latcolor --nx=100 --ny=200 -q > grid.vtk
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=_package_version(),
    )
    parser.add_argument(
        "--nx",
        type=int,
        metavar="NX",
        help="Number of grid rows",
    )
    parser.add_argument(
        "--ny",
        type=int,
        metavar="NY",
        help="Number of grid columns",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        metavar="FILE",
        help="Write the VTK file here (default: stdout)",
    )
    parser.add_argument(
        "--title",
        type=str,
        default=DEFAULT_TITLE,
        help=f"Title line of the VTK file (default: {DEFAULT_TITLE!r})",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print color statistics",
    )
    verbosity.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Also print timings",
    )
    return parser, parser.parse_args(argv)


def _configure_logging(args) -> None:
    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(
        stream=sys.stderr, level=level, format="%(message)s", force=True
    )


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser, args = parse_args(argv)
    if not argv:
        parser.print_usage(sys.stdout)
        return EXIT_USAGE

    _configure_logging(args)

    if args.nx is None or args.ny is None:
        logger.error("both --nx and --ny are required")
        return EXIT_CONFIG
    if args.nx < 1 or args.ny < 1:
        logger.error("nx < 1 || ny < 1")
        return EXIT_CONFIG
    try:
        _check_title(args.title)
    except ValueError as e:
        logger.error("invalid --title: %s", e)
        return EXIT_CONFIG

    start = time.perf_counter()
    try:
        graph = build_lattice_graph(args.nx, args.ny)
    except IndexOverflowError:
        logger.error("nx * ny > %d", INDEX_MAX)
        return EXIT_CONFIG
    logger.debug("built %r in %.3fs", graph, time.perf_counter() - start)

    start = time.perf_counter()
    coloring = color_bfs(graph)
    logger.debug("colored in %.3fs", time.perf_counter() - start)
    logger.info(usage_str(coloring))

    start = time.perf_counter()
    try:
        if args.output is None:
            write_vtk(coloring, sys.stdout, title=args.title)
        else:
            write_vtk(coloring, args.output, title=args.title)
    except (OSError, ValueError) as e:
        logger.error("cannot write VTK output: %s", e)
        return EXIT_CONFIG
    logger.debug("wrote VTK in %.3fs", time.perf_counter() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
