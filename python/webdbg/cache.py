"""Client path <-> target URL cache populated from script-parsed notifications."""

from __future__ import annotations

import threading
from typing import Dict, List, Optional, Tuple


class BidirectionalCache:
    """Single-valued bimap between canonical client paths and target URLs.

    Both directions are updated under one lock, so ``get_by_target(u) == c``
    always implies ``get_by_client(c) == u`` and vice versa.
    """

    def __init__(self) -> None:
        self._by_client: Dict[str, str] = {}
        self._by_target: Dict[str, str] = {}
        self._lock = threading.Lock()

    def put(self, client_path: str, target_url: str) -> None:
        """Record a pair; earlier pairings of either key are dropped."""
        with self._lock:
            stale_target = self._by_client.pop(client_path, None)
            if stale_target is not None:
                self._by_target.pop(stale_target, None)
            stale_client = self._by_target.pop(target_url, None)
            if stale_client is not None:
                self._by_client.pop(stale_client, None)
            self._by_client[client_path] = target_url
            self._by_target[target_url] = client_path

    def get_by_client(self, client_path: str) -> Optional[str]:
        with self._lock:
            return self._by_client.get(client_path)

    def get_by_target(self, target_url: str) -> Optional[str]:
        with self._lock:
            return self._by_target.get(target_url)

    def clear(self) -> None:
        with self._lock:
            self._by_client.clear()
            self._by_target.clear()

    def items(self) -> List[Tuple[str, str]]:
        """Snapshot of ``(client_path, target_url)`` pairs."""
        with self._lock:
            return list(self._by_client.items())

    def is_consistent(self) -> bool:
        with self._lock:
            if len(self._by_client) != len(self._by_target):
                return False
            return all(self._by_target.get(target) == client for client, target in self._by_client.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_client)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._by_client or key in self._by_target
