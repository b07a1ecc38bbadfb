"""chk — synchronous schema checker and normalizer for loosely typed data.

Only `chk` and `chk.errors` are public. Everything else is internal.
This module also resolves `__version__` deterministically across installs.

    from chk import check

    err = check(params, schema)
    if err:
        raise err
"""
from __future__ import annotations

from . import errors as errors  # re-export for star-import; noqa: F401
from .core import check, check_api, normalize
from .tipe import UNDEFINED
from .validators import ValidatorContext

# Prefer stdlib importlib.metadata
from importlib.metadata import version as _pkg_version, PackageNotFoundError


def _version_from_resource() -> str | None:
    try:
        from importlib.resources import files

        p = files(__package__).joinpath("VERSION")
        return p.read_text(encoding="utf-8").strip()
    except Exception:
        return None


def _version_from_metadata() -> str | None:
    try:
        return _pkg_version("chk")
    except PackageNotFoundError:
        return None


__version__ = _version_from_resource() or _version_from_metadata() or "0+unknown"

# Star-export surface (deterministic ordering). Tests require __all__ to be lexicographically sorted.
__all__ = [
    "UNDEFINED",
    "ValidatorContext",
    "__version__",
    "check",
    "check_api",
    "errors",
    "normalize",
]
