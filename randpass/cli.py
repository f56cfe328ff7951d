"""CLI for randpass — generate passwords or open the desktop form."""

import argparse
import logging
import random
import sys
from rich import print
from rich.markup import escape

from .config import load_config
from .generator import build

logger = logging.getLogger(__name__)

def cmd_generate(args):
    logger.debug("generate: length=%s exclude=%r copies=%s", args.length, args.exclude, args.copies)
    rng = random.Random(args.seed) if args.seed is not None else None
    for i in range(args.copies):
        result = build(
            not args.no_upper,
            not args.no_lower,
            not args.no_digits,
            not args.no_symbols,
            args.length,
            args.exclude,
            rng=rng,
        )
        if not result.ok:
            print(f"[red]{result.message}[/red]")
            return 1
        # symbols such as [ ] would otherwise be read as rich markup
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(result.password)}")
    return 0

def cmd_gui(args):
    # Qt is only needed here
    from .gui import main as gui_main
    return gui_main()

def build_parser(cfg=None):
    cfg = cfg or load_config()
    parser = argparse.ArgumentParser(prog="randpass")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=int(cfg.get("default_length", 12)), help="Password length")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--exclude", type=str, default="", help="Characters to leave out")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--seed", type=int, default=None, help="Seed for reproducible output (not for real passwords)")
    gen.set_defaults(func=cmd_generate)

    g = sub.add_parser("gui", help="Open the desktop form")
    g.set_defaults(func=cmd_gui)
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)

if __name__ == "__main__":
    sys.exit(main())
