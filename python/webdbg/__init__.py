"""
webdbg - client path <-> target URL resolution for browser-style debug targets.

The debug adapter hands every breakpoint request, script-parsed notification
and stack trace through a UrlPathTransformer.  Each concern lives in its own
module:

    paths.py        → URL detection and client path canonicalization
    mapping.py      → explicit ``pathMapping`` prefix rules
    webroot.py      → ``webRoot`` fallback heuristic
    cache.py        → bidirectional client path / target URL cache
    config.py       → launch/attach argument parsing
    transformer.py  → request pipeline hooks tying the above together
    cli.py          → ``webdbg-resolve`` offline resolution tool
"""

from .cache import BidirectionalCache  # noqa: F401
from .config import PathConfig  # noqa: F401
from .mapping import resolve_by_path_mapping  # noqa: F401
from .paths import EVAL_NAME_PREFIX, canonicalize, file_url_to_path, is_url  # noqa: F401
from .transformer import SessionConfigurable, TransformerPhase, TransformerState, UrlPathTransformer  # noqa: F401
from .webroot import resolve_by_web_root  # noqa: F401

__all__ = [
    "BidirectionalCache",
    "PathConfig",
    "resolve_by_path_mapping",
    "resolve_by_web_root",
    "EVAL_NAME_PREFIX",
    "canonicalize",
    "file_url_to_path",
    "is_url",
    "SessionConfigurable",
    "TransformerPhase",
    "TransformerState",
    "UrlPathTransformer",
]

__version__ = "0.1.0"
