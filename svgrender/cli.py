#!/usr/bin/env python3
"""
Utility command listing the SVG tags the renderer registry knows about.
Useful when writing a custom mapping file to see what the defaults cover.
"""

import argparse
import sys
from typing import List, Optional

from .config import build_factory, load_settings
from .exceptions import SvgProcessingError
from .logging_config import configure_logging_from_settings


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="svgrender-tags",
        description="List SVG tags mapped to renderers and tags that are ignored.",
    )
    p.add_argument("--mapping-file", type=str, default=None,
                   help="YAML mapping file to inspect instead of the configured one.")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--mapped-only", action="store_true",
                       help="Only list mapped tags.")
    group.add_argument("--ignored-only", action="store_true",
                       help="Only list ignored tags.")
    p.add_argument("--log-level", type=str, default=None,
                   help="Override the configured log level.")
    return p


def _describe(constructor) -> str:
    module = getattr(constructor, "__module__", "")
    name = getattr(constructor, "__qualname__", None) or repr(constructor)
    return f"{module}.{name}" if module else name


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings()
    if args.log_level:
        settings.log_level = args.log_level
    if args.mapping_file:
        settings.mapping_file = args.mapping_file
    configure_logging_from_settings(settings)

    try:
        factory = build_factory(settings)
    except SvgProcessingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.ignored_only:
        mapped = factory.mapped_tags()
        print(f"\nMapped Tags ({len(mapped)}):")
        print("=" * 80)
        print(f"{'Tag':<24} {'Renderer'}")
        print("-" * 80)
        for tag_name in mapped:
            print(f"{tag_name:<24} {_describe(factory.get_constructor(tag_name))}")

    if not args.mapped_only:
        ignored = sorted(factory.ignored_tags())
        print(f"\nIgnored Tags ({len(ignored)}):")
        print("=" * 80)
        for tag_name in ignored:
            print(tag_name)

    return 0


if __name__ == "__main__":
    sys.exit(main())
