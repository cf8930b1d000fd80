"""Launch/attach configuration for the path transformer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


def _coerce_dir(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value:
        return None
    return os.path.expanduser(value)


def _coerce_mapping(raw: Any) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        logger.debug("ignoring pathMapping of type %s", type(raw).__name__)
        return {}
    mapping: Dict[str, str] = {}
    for prefix, local_dir in raw.items():
        directory = _coerce_dir(local_dir)
        if not isinstance(prefix, str) or not prefix or directory is None:
            logger.debug("ignoring pathMapping entry %r -> %r", prefix, local_dir)
            continue
        mapping[prefix] = directory
    return mapping


@dataclass
class PathConfig:
    web_root: Optional[str] = None
    path_mapping: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_args(cls, args: Optional[Mapping[str, Any]]) -> "PathConfig":
        """Build from launch/attach arguments, tolerating missing or bad values."""
        if not isinstance(args, Mapping):
            return cls()
        web_root = args.get("webRoot") or args.get("web_root")
        raw_mapping = args.get("pathMapping") or args.get("path_mapping")
        return cls(web_root=_coerce_dir(web_root), path_mapping=_coerce_mapping(raw_mapping))


def parse_mapping_entries(entries: Iterable[str]) -> Dict[str, str]:
    """
    Parse ``PREFIX=DIR`` strings (as given on the command line) into a mapping.
    Raises ValueError for entries without ``=`` or with an empty side.
    """
    mapping: Dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"invalid mapping {entry!r}, expected PREFIX=DIR")
        prefix, local_dir = entry.split("=", 1)
        if not prefix or not local_dir:
            raise ValueError(f"invalid mapping {entry!r}, expected PREFIX=DIR")
        mapping[prefix] = local_dir
    return mapping
