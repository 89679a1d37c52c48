# src/core/classifier.py — v1
"""Filename-based classification of documentation files.

All functions are pure and case-insensitive. Checks run in a fixed order
and the first matching rule wins, so a filename carrying markers of both
categories is classified by whichever list is consulted first.
"""

from __future__ import annotations

from agentdocs.core.models import DocCategory

# Category markers, consulted in this order
TYPESPEC_MARKERS: tuple[str, ...] = (
    "typespec",
    "capabilities",
    "decorators",
    "authentication",
    "scenarios",
)
JSON_MANIFEST_MARKERS: tuple[str, ...] = (
    "manifest",
    "plugin",
    "declarative-agent",
)

# Inclusion rules for should_include()
EXCLUDE_PATTERNS: tuple[str, ...] = (
    "copilot-studio",
    "convert",
    "knowledge-sources",
)
UNIVERSAL_PATTERNS: tuple[str, ...] = (
    "declarative-agent",
    "debug",
    "localize",
    "faq",
    "publish",
    "plugin-manifest-2.4",
    "declarative-agent-manifest-1.6",
)
TYPESPEC_DOMAIN_MARKER = "typespec"
JSON_INCLUDE_PATTERNS: tuple[str, ...] = (
    "api-plugin",
    "openapi",
    "mcp-plugin",
)

DOC_EXTENSION = ".md"

_SEPARATOR = "-"


def derive_category(filename: str) -> DocCategory:
    """Coarse category of a document, from its filename."""
    lower = filename.lower()
    if any(marker in lower for marker in TYPESPEC_MARKERS):
        return "typespec"
    if any(marker in lower for marker in JSON_MANIFEST_MARKERS):
        return "json-manifest"
    return "other"


def derive_title(filename: str) -> str:
    """Human-readable title: 'multi-step-workflow.md' -> 'Multi Step Workflow'."""
    stem = filename
    if stem.lower().endswith(DOC_EXTENSION):
        stem = stem[: -len(DOC_EXTENSION)]
    words = stem.replace(_SEPARATOR, " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def should_include(filename: str, target: str) -> bool:
    """Decide whether a document is relevant to a target category.

    Order: block-list, then universal topics, then the category rule.
    The two category rules are mutually exclusive.
    """
    lower = filename.lower()

    if any(pattern in lower for pattern in EXCLUDE_PATTERNS):
        return False

    if any(pattern in lower for pattern in UNIVERSAL_PATTERNS):
        return True

    if target == "typespec":
        return TYPESPEC_DOMAIN_MARKER in lower

    if target == "json-manifest":
        has_json_pattern = any(p in lower for p in JSON_INCLUDE_PATTERNS)
        return has_json_pattern and TYPESPEC_DOMAIN_MARKER not in lower

    return False


def is_document(name: str, entry_type: str = "file") -> bool:
    """True for plain Markdown files in a directory listing."""
    return entry_type == "file" and name.endswith(DOC_EXTENSION)
