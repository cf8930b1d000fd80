"""Path canonicalization helpers shared by the webdbg resolvers.

Everything in here is a pure string transformation: no filesystem access,
no working-directory lookups, and no exceptions for odd input.  A best-effort
value is always returned.
"""

from __future__ import annotations

import ntpath
import posixpath
import re
from typing import Any
from urllib.parse import unquote

# Name prefix the target gives to dynamically evaluated scripts.
EVAL_NAME_PREFIX = "eval://"

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_DRIVE_RE = re.compile(r"^[A-Za-z]:([\\/]|$)")
_FILE_URL_DRIVE_RE = re.compile(r"^/[A-Za-z]:([\\/]|$)")
_FILE_URL_PREFIX = "file://"


def _is_windows_path(value: str) -> bool:
    return bool(_DRIVE_RE.match(value)) or value.startswith("\\\\")


def is_absolute_path(value: Any) -> bool:
    """True for POSIX absolute paths, drive-letter paths and UNC paths."""
    if not isinstance(value, str) or not value:
        return False
    return value.startswith("/") or _is_windows_path(value)


def is_url(value: Any) -> bool:
    """Return True when *value* carries a URL scheme (``http:``, ``eval:``...).

    Single-letter schemes are drive letters, so ``c:\\proj`` is a path.
    """
    if not isinstance(value, str) or not value:
        return False
    if is_absolute_path(value):
        return False
    match = _SCHEME_RE.match(value)
    return bool(match) and len(match.group(1)) > 1


def is_file_url(value: Any) -> bool:
    return isinstance(value, str) and value[: len(_FILE_URL_PREFIX)].lower() == _FILE_URL_PREFIX


def file_url_to_path(value: str) -> str:
    """Convert a ``file://`` URL into a local path; other input is returned as is."""
    if not is_file_url(value):
        return value
    path = value[len(_FILE_URL_PREFIX) :]
    for marker in ("?", "#"):
        path = path.split(marker, 1)[0]
    path = unquote(path)
    if _FILE_URL_DRIVE_RE.match(path):
        # file:///c:/proj -> c:\proj
        return path[1:].replace("/", "\\")
    if path and not path.startswith("/"):
        # file://server/share -> \\server\share
        return "\\\\" + path.replace("/", "\\")
    return path


def canonicalize(value: Any, *, fold_case: bool = False) -> str:
    """Return the canonical form of a client path, suitable as a cache key.

    ``file://`` URLs are turned into paths first.  Other URLs are returned
    unchanged.  Windows-style paths get backslashes and a lower-case drive
    letter, POSIX paths forward slashes.  ``fold_case`` lower-cases the whole
    path for case-insensitive filesystems.  The result is idempotent.
    """
    if not isinstance(value, str) or not value:
        return ""
    path = file_url_to_path(value)
    if not path:
        return ""
    if is_url(path):
        return path
    if _is_windows_path(path):
        path = ntpath.normpath(path)
        if _DRIVE_RE.match(path):
            path = path[0].lower() + path[1:]
    else:
        path = posixpath.normpath(path.replace("\\", "/"))
    if fold_case:
        path = path.lower()
    return path


def join_client_path(directory: str, relative: str, *, fold_case: bool = False) -> str:
    """Join *relative* (URL-style, ``/`` separated) onto a client directory."""
    relative = relative.lstrip("/\\")
    if _is_windows_path(directory):
        joined = ntpath.join(directory, relative.replace("/", "\\"))
    else:
        joined = posixpath.join(directory, relative)
    return canonicalize(joined, fold_case=fold_case)
