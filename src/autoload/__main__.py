"""CLI entry point: run `autoload --root DIR Vendor/Cls` or `python -m autoload ...`."""

import logging
import sys
from pathlib import Path
from typing import List, Optional


def _describe(value) -> str:
    module = sys.modules.get(getattr(value, "__module__", ""), None)
    origin = getattr(module, "__file__", None)
    name = getattr(value, "__qualname__", repr(value))
    return f"{name} ({origin})" if origin else name


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    from .loader.path_resolver import PathResolver
    from .loader.service import Autoload
    from .shared.errors import AutoloadError, format_error

    parser = argparse.ArgumentParser(prog="autoload", description="Resolve symbols through autoload strategies.")
    parser.add_argument("symbols", nargs="*", help="Symbols to look up, e.g. Acme/Http/Request")
    parser.add_argument("--root", action="append", type=Path, default=[],
                        help="Root directory strategy (repeatable, tried in order)")
    parser.add_argument("--prepend", action="append", type=Path, default=[],
                        help="Root directory strategy tried before every --root")
    parser.add_argument("--preload", action="append", default=[], metavar="SYMBOL",
                        help="Symbol to load eagerly from the first root (repeatable, in order)")
    parser.add_argument("--extension", default=None, help="Source unit extension (default: .py)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log resolution steps")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    roots = args.root + args.prepend
    if not roots:
        parser.error("at least one --root or --prepend is required")

    autoload = Autoload()
    try:
        for root in args.root:
            autoload.register(str(root), root.resolve(), extension=args.extension)
        for root in args.prepend:
            autoload.register(str(root), root.resolve(), prepend=True, extension=args.extension)

        if args.preload:
            resolver = PathResolver(roots[0].resolve(), args.extension)
            autoload.include(args.preload, lambda symbol: resolver.resolve(symbol).unwrap())

        for symbol in args.symbols:
            print(f"{symbol} -> {_describe(autoload.lookup(symbol))}")
    except AutoloadError as e:
        sys.stderr.write(format_error(e) + "\n")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
