"""Pointer-style reference resolution service."""

from __future__ import annotations

REF_SEPARATOR = "/"
ANCHOR_MARKER = "#"
DEFAULT_BASE_URL = ANCHOR_MARKER


def resolve_ref(ref: str | None) -> str | None:
    """Return the final path segment of a reference, or None for an absent reference.

    Only the last segment is meaningful; the number of preceding segments is never
    inspected, so ``#/components/schemas/Order`` and ``Order`` both resolve to ``Order``.
    """
    if not ref:
        return None
    return ref.rsplit(REF_SEPARATOR, 1)[-1]


def build_base_url(location_path: str = "", location_query: str = "") -> str:
    """Build the anchor base URL from the rendering location (path + query + '#')."""
    return f"{location_path}{location_query}{ANCHOR_MARKER}"


class ReferenceResolver:
    """Resolves references into display names and in-page anchor URLs."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    def resolve(self, ref: str | None) -> str | None:
        return resolve_ref(ref)

    def anchor_url(self, ref: str | None) -> str | None:
        """Return base URL + resolved name, or None when the reference is absent."""
        title = resolve_ref(ref)
        if title is None:
            return None
        return self._base_url + title
