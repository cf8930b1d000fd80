"""Resolve target URLs to client paths through explicit ``pathMapping`` rules."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import SplitResult, unquote, urlsplit

from .paths import canonicalize, is_file_url, is_url, join_client_path


def _split_url(target_url: Any) -> Optional[SplitResult]:
    if not is_url(target_url) or is_file_url(target_url):
        return None
    try:
        parts = urlsplit(target_url)
    except ValueError:
        return None
    if not parts.path:
        return None
    return parts


def _ordered_rules(mapping: Mapping[str, str]) -> List[Tuple[str, str]]:
    """Longest prefix first; equal lengths keep their declaration order."""
    rules = [
        (prefix, local_dir)
        for prefix, local_dir in mapping.items()
        if isinstance(prefix, str) and prefix and isinstance(local_dir, str) and local_dir
    ]
    return sorted(rules, key=lambda rule: len(rule[0]), reverse=True)


def _strip_prefix(source: str, prefix: str) -> Optional[str]:
    """Return what follows *prefix* in *source* if it ends on a segment boundary."""
    if not source.startswith(prefix):
        return None
    if len(source) == len(prefix):
        return ""
    if prefix.endswith("/") or source[len(prefix)] == "/":
        return source[len(prefix) :]
    return None


def resolve_by_path_mapping(
    target_url: Any,
    mapping: Optional[Mapping[str, str]],
    *,
    fold_case: bool = False,
) -> Optional[str]:
    """Map *target_url* to a client path using the first best-matching rule.

    Rule keys are either URL path prefixes (``/app/``) or full URL prefixes
    (``http://localhost:8080/app``).  Query strings and fragments never take
    part in matching.  ``file:`` URLs, bare paths and URLs without a path are
    not handled here.
    """
    if not mapping:
        return None
    parts = _split_url(target_url)
    if parts is None:
        return None
    url_without_query = f"{parts.scheme}://{parts.netloc}{parts.path}"
    for prefix, local_dir in _ordered_rules(mapping):
        source = url_without_query if is_url(prefix) else parts.path
        remainder = _strip_prefix(source, prefix)
        if remainder is None:
            continue
        if not remainder.strip("/"):
            return canonicalize(local_dir, fold_case=fold_case)
        return join_client_path(local_dir, unquote(remainder), fold_case=fold_case)
    return None
