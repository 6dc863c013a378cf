"""
Command line entrypoint.

    tentapress-export [--no-settings] [--no-theme] [--no-plugins] [--no-seo]
                      [--init-schema] [--verbose]

Configuration comes from the TENTAPRESS_* environment variables. The
path of the written archive is printed on success.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config
from .export import ExportOptions, create_exporter


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tentapress-export",
        description="Export TentaPress content to a ZIP archive",
    )
    ap.add_argument("--no-settings", action="store_true", help="skip settings.json")
    ap.add_argument("--no-theme", action="store_true", help="skip theme.json")
    ap.add_argument("--no-plugins", action="store_true", help="skip plugins.json")
    ap.add_argument("--no-seo", action="store_true", help="skip seo.json")
    ap.add_argument(
        "--init-schema",
        action="store_true",
        help="create the TentaPress tables first (SQLite only)",
    )
    ap.add_argument("--verbose", "-v", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    options = ExportOptions(
        include_settings=not args.no_settings,
        include_theme=not args.no_theme,
        include_plugins=not args.no_plugins,
        include_seo=not args.no_seo,
    )

    try:
        exporter = create_exporter(load_config(), init_schema=args.init_schema)
        result = exporter.create_export_zip(options)
    # ExportError is a RuntimeError; an unknown backend name is a ValueError.
    except (ValueError, RuntimeError) as exc:
        print(f"export failed: {exc}", file=sys.stderr)
        return 1

    print(result.path)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
