"""
Path transformer translating between client file paths and target URLs.

The transformer sits in the request pipeline of a debug adapter: breakpoint
requests are rewritten client -> target, script-parsed notifications and
stack traces target -> client.  It never fails a request; an unknown path is
passed through and logged.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from .cache import BidirectionalCache
from .config import PathConfig
from .mapping import resolve_by_path_mapping
from .paths import EVAL_NAME_PREFIX, canonicalize, is_url
from .webroot import ExistsProbe, resolve_by_web_root

JsonDict = Dict[str, Any]


class SessionConfigurable(Protocol):
    """Component configured from launch/attach request arguments."""

    def launch(self, args: JsonDict) -> None:
        ...

    def attach(self, args: JsonDict) -> None:
        ...


class TransformerPhase(enum.Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"


@dataclass
class TransformerState:
    """Mutable per-session state owned by a single UrlPathTransformer."""

    web_root: Optional[str] = None
    path_mapping: Dict[str, str] = field(default_factory=dict)
    cache: BidirectionalCache = field(default_factory=BidirectionalCache)
    phase: TransformerPhase = TransformerPhase.UNCONFIGURED
    fold_case: bool = False
    exists: Optional[ExistsProbe] = None

    def apply(self, config: PathConfig) -> None:
        self.web_root = config.web_root
        self.path_mapping = dict(config.path_mapping)
        self.phase = TransformerPhase.CONFIGURED


class UrlPathTransformer:
    """Converts local client paths to target URLs and back.

    Sibling transformers that also need the launch/attach configuration are
    chained through ``delegate``; it receives the same arguments after this
    transformer has captured its own settings.
    """

    def __init__(
        self,
        state: Optional[TransformerState] = None,
        *,
        delegate: Optional[SessionConfigurable] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.state = state if state is not None else TransformerState()
        self.delegate = delegate
        self.logger = logger or logging.getLogger("webdbg.paths")

    @property
    def phase(self) -> TransformerPhase:
        return self.state.phase

    # Lifecycle --------------------------------------------------------
    def launch(self, args: JsonDict) -> None:
        self._configure("launch", args)
        if self.delegate is not None:
            self.delegate.launch(args)

    def attach(self, args: JsonDict) -> None:
        self._configure("attach", args)
        if self.delegate is not None:
            self.delegate.attach(args)

    def _configure(self, kind: str, args: JsonDict) -> None:
        config = PathConfig.from_args(args)
        self.state.apply(config)
        self.logger.info(
            "Paths.%s: webRoot=%s, pathMapping=%s",
            kind,
            config.web_root,
            config.path_mapping,
        )

    def clearTargetContext(self) -> None:  # noqa: N802
        self.state.cache.clear()
        self.logger.debug("Paths.clearTargetContext: cache cleared")

    # Client -> target -------------------------------------------------
    def setBreakpoints(self, args: JsonDict) -> None:  # noqa: N802
        source = args.get("source") if isinstance(args, dict) else None
        if not isinstance(source, dict):
            return
        path = source.get("path")
        if not path or not isinstance(path, str):
            # sourceReference-only source, nothing to resolve
            return

        if is_url(path):
            self.logger.info("Paths.setBP: %s is already a URL", path)
            return

        client_path = canonicalize(path, fold_case=self.state.fold_case) or path
        target_url = self.state.cache.get_by_client(client_path)
        if target_url:
            source["path"] = target_url
            self.logger.info("Paths.setBP: Resolved %s to %s", client_path, target_url)
        else:
            self.logger.info("Paths.setBP: No target url cached yet for client path: %s.", client_path)
            source["path"] = client_path

    def getTargetPathFromClientPath(self, client_path: str) -> Optional[str]:  # noqa: N802
        if is_url(client_path):
            return client_path
        return self.state.cache.get_by_client(canonicalize(client_path, fold_case=self.state.fold_case))

    # Target -> client -------------------------------------------------
    def scriptParsed(self, script_url: str) -> str:  # noqa: N802
        state = self.state
        client_path = resolve_by_path_mapping(script_url, state.path_mapping, fold_case=state.fold_case)
        if not client_path:
            client_path = self._resolve_by_web_root(script_url)

        if not client_path:
            # eval scripts are never expected to resolve
            if not (isinstance(script_url, str) and script_url.startswith(EVAL_NAME_PREFIX)):
                self.logger.info(
                    "Paths.scriptParsed: could not resolve %s to a file under webRoot: %s. "
                    "It may be external or served directly from the server's memory (and that's OK).",
                    script_url,
                    state.web_root,
                )
            return script_url

        self.logger.info("Paths.scriptParsed: resolved %s to %s. webRoot: %s", script_url, client_path, state.web_root)
        state.cache.put(client_path, script_url)
        return client_path

    def stackTraceResponse(self, response: JsonDict) -> None:  # noqa: N802
        frames = response.get("stackFrames") if isinstance(response, dict) else None
        for frame in frames or []:
            source = frame.get("source") if isinstance(frame, dict) else None
            if not isinstance(source, dict) or not source.get("path"):
                continue
            # Unresolved frames keep their URL and sourceReference for the
            # source map transformer further down the pipeline.
            target_path = source["path"]
            client_path = self.getClientPathFromTargetPath(target_path) or self._resolve_by_web_root(target_path)
            if client_path:
                source["path"] = client_path
                source.pop("sourceReference", None)
                source.pop("origin", None)

    def getClientPathFromTargetPath(self, target_path: str) -> Optional[str]:  # noqa: N802
        if not isinstance(target_path, str):
            return None
        return self.state.cache.get_by_target(target_path)

    def _resolve_by_web_root(self, target_url: str) -> Optional[str]:
        state = self.state
        return resolve_by_web_root(target_url, state.web_root, exists=state.exists, fold_case=state.fold_case)
