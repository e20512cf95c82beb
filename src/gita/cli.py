#!/usr/bin/env python3
"""
Gita Reader CLI

Commands:
  chapters [--search Q]   List chapters, optionally filtered
  verse CHAPTER VERSE     Show one verse with navigation
  warm [CHAPTER ...]      Prefetch chapters into the cache
  clear-cache             Drop every cached chapter

Usage:
  gita verse 2 47
  GITA_CACHE_DB_PATH=/tmp/gita.db gita warm
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .chapters import filter_chapters
from .config import GitaConfig, default_config, load_config
from .errors import GitaError, NotFoundError
from .loader import ChapterDataLoader, build_loader
from .navigation import VersePosition
from .render import render_chapter_list, render_navigation, render_verse

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gita", description="Read the Bhagavad Gita from the terminal.")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML config file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    chapters = sub.add_parser("chapters", help="List chapters")
    chapters.add_argument("--search", default="", help="Filter by name, Sanskrit name or number")

    verse = sub.add_parser("verse", help="Show a verse")
    verse.add_argument("chapter", type=int)
    verse.add_argument("verse", type=int)

    warm = sub.add_parser("warm", help="Prefetch chapters into the cache")
    warm.add_argument("chapters", type=int, nargs="*", help="Chapter numbers (default: all)")

    sub.add_parser("clear-cache", help="Remove cached chapters")

    return parser.parse_args(argv)


def _configure_logging(config: GitaConfig, verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        level=logging.DEBUG if verbose else getattr(logging, config.log_level, logging.INFO),
    )


def run(args: argparse.Namespace, loader: ChapterDataLoader) -> int:
    if args.command == "chapters":
        chapters = filter_chapters(loader.get_all_chapters(), args.search)
        if not chapters:
            print(f"No chapters match '{args.search}'")
            return 0
        print(render_chapter_list(chapters))
        return 0

    if args.command == "verse":
        info = loader.get_chapter_info(args.chapter)
        if info is None:
            print(f"Error: chapter {args.chapter} does not exist (1-{len(loader.chapters)})")
            return 1
        record = loader.get_verse(args.chapter, args.verse)
        print(render_verse(record, info))
        print()
        print(render_navigation(VersePosition(args.chapter, args.verse), loader.chapters))
        return 0

    if args.command == "warm":
        result = loader.warm_cache(args.chapters or None)
        print(f"Cached {len(result['cached'])} chapters")
        for number, message in sorted(result["failed"].items()):
            print(f"  chapter {number}: {message}")
        return 1 if result["failed"] else 0

    if args.command == "clear-cache":
        cleared = loader.clear_cache()
        print(f"Cleared {cleared} cached chapters")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        config = load_config(args.config) if args.config else default_config()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}")
        return 1
    _configure_logging(config, args.verbose)

    loader = build_loader(config)
    try:
        return run(args, loader)
    except NotFoundError as e:
        print(f"Error: {e}.")
        return 1
    except GitaError as e:
        print(f"Error: failed to load data ({e}). Please try again.")
        return 1
    finally:
        loader.cache.backend.close()


if __name__ == "__main__":
    sys.exit(main())
