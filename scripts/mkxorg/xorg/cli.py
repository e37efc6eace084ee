"""CLI entry point for the xorg.conf generator."""

import argparse
import shlex
import sys
from pathlib import Path
from typing import List, Optional

from mkxorg.logging import configure_logging
from .config import GeneratorConfig
from .console import Reporter
from .manager import XorgConfigManager

PROG = "mkxorgconf"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

EPILOG = """\
option tokens (comma separated, e.g. "fbdev,1600x900,composite"):
  WIDTHxHEIGHT       resolution, also res=WIDTHxHEIGHT
  auto               use the framebuffer's current resolution if trustworthy
  depth=N, d=N       default colour depth
  h=RANGE, v=RANGE   monitor HorizSync / VertRefresh
  composite, c       enable the Composite extension
  uxa, sna           intel driver with the given AccelMethod
  vbox               VirtualBox preset (vesa, 28-70, 1280x1024)
  safe, default      start from the default driver
  anything else      driver name
"""


class UsageError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=PROG,
        description="Generate an xorg.conf from a compact option string",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-f", "--force", action="store_true", help="use the driver even if it isn't installed")
    parser.add_argument("-o", "--output", metavar="FILE", type=Path, help="write to FILE instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug logging")
    parser.add_argument("--no-color", dest="color", action="store_false", help="plain diagnostics")
    parser.add_argument("options", nargs="?", default="", help="comma separated option tokens")
    return parser


def main(argv: Optional[List[str]] = None, config: Optional[GeneratorConfig] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    config = config or GeneratorConfig()
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        Reporter(color=config.color).error(str(e))
        parser.print_usage(sys.stderr)
        return EXIT_USAGE
    except SystemExit as e:
        # --help
        return e.code or EXIT_OK

    config.color = config.color and args.color
    configure_logging("DEBUG" if args.verbose else "WARNING", color=config.color)

    manager = XorgConfigManager(config)
    command_line = shlex.join([PROG] + argv)
    content = manager.generate(args.options, command_line, force=args.force, output_path=args.output)

    if not manager.write_output(content, args.output):
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
