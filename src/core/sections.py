# src/core/sections.py — v1
"""Markdown section extraction for capability documentation."""

from __future__ import annotations


def _heading_patterns(heading: str) -> tuple[str, ...]:
    return (
        f"## {heading}",
        f"### {heading}",
        f"## {heading} Capability",
        f"### {heading} Capability",
    )


def extract_section(markdown: str, heading: str) -> str:
    """Return the section that starts at a heading for ``heading``.

    Capture starts at the first line containing ``## heading`` or
    ``### heading`` (optionally suffixed with ``Capability``) and stops at
    the next top- or second-level heading that is not itself a match.
    Returns an empty string when no heading matches.
    """
    patterns = _heading_patterns(heading)
    capturing = False
    section: list[str] = []

    for line in markdown.split("\n"):
        matches = any(p in line for p in patterns)

        if matches and not capturing:
            capturing = True
            section.append(line)
            continue

        if capturing and (line.startswith("## ") or line.startswith("# ")):
            if not matches:
                break

        if capturing:
            section.append(line)

    return "\n".join(section).strip()
