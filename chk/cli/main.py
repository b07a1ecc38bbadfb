"""
Check a YAML/JSON value document against a YAML/JSON schema document.

Usage:
  chk [--strict] [--ignore-defaults] [--ignore-required] [--do-not-coerce]
      [--json] [--quiet] [--debug] [--version] SCHEMA [VALUE]
  # VALUE defaults to '-' (STDIN)

Exit codes:
  0 = value is valid (normalized value printed with --json)
  1 = value is invalid
  2 = load/parse errors or bad usage

Schemas read from files can't carry validator functions, and are always
checked with untrusted=True.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List

from ..core import check_api
from ..errors import DocumentError, format_error
from ..io import load_document
from ._exit import INVALID, OK, USER_ERR
from ._io import eprint, print_json, set_quiet

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chk",
        description="Validate and normalize a value against a chk schema",
        allow_abbrev=False,
    )
    try:
        from chk import __version__ as _VER  # lazy import to avoid side effects
    except Exception:
        _VER = "unknown"
    parser.add_argument("--version", action="version", version=f"chk {_VER}")
    parser.add_argument("schema", help="Path to the schema document (YAML or JSON). Use '-' for STDIN.")
    parser.add_argument("value", nargs="?", default="-",
                        help="Path to the value document (YAML or JSON). Defaults to STDIN.")
    parser.add_argument("--strict", action="store_true", help="Reject object keys the schema does not declare.")
    parser.add_argument("--ignore-defaults", action="store_true", help="Do not fill in schema defaults.")
    parser.add_argument("--ignore-required", action="store_true", help="Do not enforce required fields.")
    parser.add_argument("--do-not-coerce", action="store_true",
                        help="Do not coerce strings to declared number/boolean types.")
    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON on stdout.")
    parser.add_argument("--quiet", action="store_true", help="Suppress diagnostics on stderr.")
    parser.add_argument("--debug", action="store_true", help="Log each checked node to stderr.")
    return parser


def _options(ns: argparse.Namespace) -> Dict[str, Any]:
    return {
        "strict": ns.strict,
        "ignore_defaults": ns.ignore_defaults,
        "ignore_required": ns.ignore_required,
        "do_not_coerce": ns.do_not_coerce,
        # documents from disk are never trusted to run code
        "untrusted": True,
        "log": ns.debug,
    }


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ns = build_parser().parse_args(argv)

    set_quiet(ns.quiet)
    logging.basicConfig(
        level=logging.DEBUG if ns.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if ns.schema == "-" and ns.value == "-":
        eprint("error: SCHEMA and VALUE cannot both be read from STDIN")
        return USER_ERR

    try:
        schema = load_document(ns.schema)
        value = load_document(ns.value)
    except DocumentError as e:
        eprint(f"error: {e}")
        return USER_ERR

    ok, err, normalized = check_api(value, schema, _options(ns))
    if not ok:
        assert err is not None
        _logger.debug("invalid: %s", format_error(err))
        if ns.json:
            print_json({"ok": False, "code": err.code, "message": str(err), "key": err.info.get("key")})
        else:
            print("INVALID")
            print(format_error(err))
        return INVALID

    if ns.json:
        print_json({"ok": True, "value": normalized})
    else:
        print("OK")
    return OK


if __name__ == "__main__":
    raise SystemExit(main())
