from __future__ import annotations

import json
import sys
from typing import Any

# Verbosity gate
QUIET = False


def set_quiet(quiet: bool = False) -> None:
    global QUIET
    QUIET = bool(quiet)


def eprint(msg: str) -> None:
    if not QUIET:
        print(msg, file=sys.stderr)


def _json_default(obj: Any) -> Any:
    # numpy values and other stragglers; never fail the output path
    tolist = getattr(obj, "tolist", None)
    if callable(tolist):
        return tolist()
    return repr(obj)


def print_json(obj: Any) -> None:
    """Dump obj using compact, stable separators (no color)."""
    sys.stdout.write(json.dumps(obj, separators=(",", ":"), sort_keys=True, default=_json_default) + "\n")
