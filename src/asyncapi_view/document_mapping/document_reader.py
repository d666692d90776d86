"""Raw document reading service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml


class DocumentReadError(Exception):
    """Raised when a raw document cannot be read or parsed."""


def load_raw_document(document_path: Path | str) -> Mapping[str, Any]:
    """Read a JSON or YAML document from disk."""
    path = Path(document_path)
    if not path.exists():
        raise DocumentReadError(f"Document file not found: {path}")
    return parse_raw_document(path.read_text(encoding="utf-8"))


def parse_raw_document(text: str) -> Mapping[str, Any]:
    """Parse document text; JSON is accepted as a subset of YAML."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentReadError(f"Failed to parse document: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise DocumentReadError("Document root must be a mapping.")
    return parsed
