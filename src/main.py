# src/main.py — v1
"""CLI entry point — fetch, doc, list, stats, clear commands.

Usage:
    agentdocs fetch --category typespec
    agentdocs doc capabilities [--section NAME]
    agentdocs list [--category json-manifest]
    agentdocs stats
    agentdocs clear [KEY]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from agentdocs.core.models import DOC_ROLES, TARGET_CATEGORIES
from agentdocs.version import __version__

logger = logging.getLogger(__name__)

CATEGORY_CHOICES = (*TARGET_CATEGORIES, "other")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        _setup_logging(args.verbose)
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="agentdocs",
        description=f"agentdocs v{__version__} — remote documentation cache",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- fetch ---
    p_fetch = subparsers.add_parser(
        "fetch", help="Warm the cache and print documents for a category",
    )
    p_fetch.add_argument(
        "-c", "--category", choices=TARGET_CATEGORIES, default="typespec",
        help="Target category (default: typespec)",
    )
    p_fetch.add_argument(
        "--titles-only", action="store_true",
        help="Print only document titles",
    )
    p_fetch.set_defaults(func=_cmd_fetch)

    # --- doc ---
    p_doc = subparsers.add_parser(
        "doc", help="Print the document for a well-known role",
    )
    p_doc.add_argument("role", choices=DOC_ROLES, help="Document role")
    p_doc.add_argument(
        "--section", default=None,
        help="Only print the section for this capability heading",
    )
    p_doc.set_defaults(func=_cmd_doc)

    # --- list ---
    p_list = subparsers.add_parser("list", help="List indexed documents")
    p_list.add_argument(
        "-c", "--category", choices=CATEGORY_CHOICES, default=None,
        help="Only documents of this derived category",
    )
    p_list.set_defaults(func=_cmd_list)

    # --- stats ---
    p_stats = subparsers.add_parser("stats", help="Show disk cache statistics")
    p_stats.set_defaults(func=_cmd_stats)

    # --- clear ---
    p_clear = subparsers.add_parser("clear", help="Clear one key or the whole cache")
    p_clear.add_argument("key", nargs="?", default=None, help="Document filename")
    p_clear.set_defaults(func=_cmd_clear)

    return parser


async def _cmd_fetch(args: argparse.Namespace) -> int:
    """Load the whole corpus and print the documents for one category."""
    from agentdocs.api.facade import create_docs_cache

    async with create_docs_cache() as docs:
        result = await docs.load_category(args.category)

    for title, content in result.documents.items():
        if args.titles_only:
            print(title)
        else:
            print(f"# {title}\n\n{content}\n\n---\n")

    print(
        f"\n{len(result.documents)} {args.category} documents "
        f"({result.loaded}/{result.total} cached, {len(result.failed)} failed)",
        file=sys.stderr,
    )
    return 0 if not result.failed else 2


async def _cmd_doc(args: argparse.Namespace) -> int:
    """Print a role document, or one capability section of it."""
    from agentdocs.api.facade import create_docs_cache

    async with create_docs_cache() as docs:
        if args.section:
            if args.role != "capabilities":
                logger.error("--section is only supported for 'capabilities'")
                return 1
            text = await docs.get_capability_section(args.section)
            if not text:
                logger.error("Section not found: %s", args.section)
                return 1
        else:
            text = await docs.get_document_for_role(args.role)

    print(text)
    return 0


async def _cmd_list(args: argparse.Namespace) -> int:
    """Print the index as filename, category and title columns."""
    from agentdocs.api.facade import create_docs_cache

    async with create_docs_cache() as docs:
        if args.category:
            descriptors = await docs.get_metadata_for_category(args.category)
        else:
            descriptors = await docs.list_documents()

    for doc in descriptors:
        print(f"{doc.filename:50s} {doc.category:14s} {doc.title}")
    return 0


async def _cmd_stats(args: argparse.Namespace) -> int:
    """Display disk cache statistics."""
    from agentdocs.api.facade import create_docs_cache

    async with create_docs_cache() as docs:
        stats = docs.stats()

    print(f"\nCache directory: {stats.cache_dir}")
    print(f"  Exists:  {stats.exists}")
    print(f"  Files:   {stats.file_count}")
    for name in stats.files:
        print(f"    {name}")
    return 0


async def _cmd_clear(args: argparse.Namespace) -> int:
    """Remove one key or every cached file."""
    from agentdocs.api.facade import create_docs_cache

    async with create_docs_cache() as docs:
        await docs.clear(args.key)

    print(f"Cleared {args.key}" if args.key else "Cleared all cached documentation")
    return 0


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage from settings."""
    from agentdocs.config.settings import Settings
    from agentdocs.logging.logger import setup_logging

    settings = Settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
