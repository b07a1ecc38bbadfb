from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import yaml

from ..errors import DocumentError

__all__ = ["load_document", "load_text"]

_logger = logging.getLogger(__name__)


def load_text(text: str, *, source: str = "<string>") -> Any:
    """Parse a YAML document (JSON is a subset, so it loads too).

    An empty document loads as None. Parse failures raise DocumentError.
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(f"failed to parse {source}: {e}") from e


def load_document(path: str | Path, *, stdin: TextIO | None = None) -> Any:
    """Load YAML (preferred) or JSON from `path`; '-' reads from stdin."""
    if str(path) == "-":
        stream = stdin if stdin is not None else sys.stdin
        return load_text(stream.read(), source="<stdin>")
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentError(f"file not found: {p}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"failed to read {p}: {e}") from e
    _logger.debug("loaded %s (%d bytes)", p, len(text))
    return load_text(text, source=str(p))
