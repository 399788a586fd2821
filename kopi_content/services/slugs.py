"""Slug and excerpt derivation.

Slugs are URL-safe identifiers derived from a product name or post title and
used as a secondary key (e.g. /products/aceh-gayo). They are a pure function
of the text at write time:

    "Aceh Gayo"        -> "aceh-gayo"
    "  Multi   Space " -> "multi-space"

Uniqueness is not guaranteed by derive_slug; see unique_slug for the opt-in
disambiguation used when UNIQUE_SLUGS is enabled.
"""

from collections.abc import Collection
import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9-]+")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")

_HTML_TAG_RE = re.compile(r"<[^>]+>")
_MD_HEADING_RE = re.compile(r"#+\s")
_MD_MARKER_RE = re.compile(r"[*_>`]")

DEFAULT_EXCERPT_LENGTH = 150
ELLIPSIS = "..."


def derive_slug(text: str) -> str:
    """Map a display name/title to a lowercase ASCII slug (letters, digits, hyphens)."""
    slug = _WHITESPACE_RE.sub("-", text.strip().lower())
    slug = _NON_SLUG_RE.sub("", slug)
    slug = _HYPHEN_RUN_RE.sub("-", slug)
    return slug.strip("-")


def unique_slug(base: str, taken: Collection[str]) -> str:
    """Return `base`, or the first `base-N` (N >= 2) not in `taken`."""
    if base not in taken:
        return base
    n = 2
    while f"{base}-{n}" in taken:
        n += 1
    return f"{base}-{n}"


def strip_markup(content: str) -> str:
    """Remove HTML tags and Markdown markers, collapsing whitespace to single spaces."""
    text = _HTML_TAG_RE.sub("", content)
    text = _MD_HEADING_RE.sub("", text)
    text = _MD_MARKER_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def make_excerpt(content: str, bound: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Build a plain-text preview of at most `bound` characters plus an ellipsis.

    Short content is returned as-is (after markup stripping). Longer content is
    cut at the last space at or before `bound`, so no word is split. A single
    word longer than `bound` is the only case that gets a hard cut.
    """
    text = strip_markup(content)
    if len(text) <= bound:
        return text

    cut = text.rfind(" ", 0, bound + 1)
    head = text[:cut] if cut > 0 else text[:bound]
    return f"{head.rstrip()}{ELLIPSIS}"
