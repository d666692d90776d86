"""Reference resolution exports."""

from .reference_resolver import DEFAULT_BASE_URL, ReferenceResolver, build_base_url, resolve_ref

__all__ = [
    "DEFAULT_BASE_URL",
    "ReferenceResolver",
    "build_base_url",
    "resolve_ref",
]
