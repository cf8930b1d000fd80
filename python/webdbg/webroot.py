"""Fallback resolution of target URLs against a single ``webRoot`` directory."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional
from urllib.parse import unquote, urlsplit

from .paths import canonicalize, is_file_url, is_url, join_client_path

logger = logging.getLogger(__name__)

ExistsProbe = Callable[[str], bool]


def _url_path_segments(target_url: str) -> List[str]:
    """Decoded path segments of a hierarchical URL, or [] for opaque URLs."""
    if not is_url(target_url):
        return []
    _, rest = target_url.split(":", 1)
    if not rest.startswith("//"):
        return []
    try:
        path = urlsplit(target_url).path
    except ValueError:
        return []
    return [segment for segment in unquote(path).split("/") if segment]


def resolve_by_web_root(
    target_url: Any,
    web_root: Optional[str],
    *,
    exists: Optional[ExistsProbe] = None,
    fold_case: bool = False,
) -> Optional[str]:
    """Resolve *target_url* by joining its URL path onto *web_root*.

    Without an ``exists`` probe this is a pure string operation.  With one,
    leading path segments are dropped until a candidate under the web root
    exists, so ``http://host/static/js/app.js`` can still land on
    ``<webRoot>/js/app.js``.
    """
    if not web_root or not isinstance(target_url, str) or not target_url:
        return None

    if is_file_url(target_url):
        local_path = canonicalize(target_url, fold_case=fold_case)
        if local_path and (exists is None or exists(local_path)):
            return local_path

    segments = _url_path_segments(target_url)
    if not segments:
        return None
    if exists is None:
        return join_client_path(web_root, "/".join(segments), fold_case=fold_case)

    while segments:
        candidate = join_client_path(web_root, "/".join(segments), fold_case=fold_case)
        if exists(candidate):
            return candidate
        segments.pop(0)
    logger.debug("no file under %s matches %s", web_root, target_url)
    return None
