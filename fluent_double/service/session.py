from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Optional

from fluent_double.core.config import FluentDoubleSettings, settings as default_settings
from fluent_double.core.exceptions import exception_constants
from fluent_double.core.exceptions.base import RecordingClosedError, SurfaceConfigurationError
from fluent_double.models.expectation import ExpectationChain
from fluent_double.service.double import ChainDouble
from fluent_double.service.recorder import ChainRecorder
from fluent_double.service.surface_registry import SurfaceRegistry

logger = logging.getLogger(__name__)


class ChainSession:
    """
    Owns every chain/double pair of one recorded call tree.

    Parent expectations refer to child chains by id only; the session is the
    single place those ids resolve to doubles. Replaying any call seals every
    chain of the session.
    """

    def __init__(
        self,
        registry: Optional[SurfaceRegistry] = None,
        settings: Optional[FluentDoubleSettings] = None,
        allow_extra_calls: Optional[bool] = None,
    ):
        self._registry = registry or SurfaceRegistry()
        self._settings = settings or default_settings
        self._allow_extra_calls = allow_extra_calls
        self._chains: Dict[str, ExpectationChain] = {}
        self._doubles: Dict[str, ChainDouble] = {}
        self._root_ids: List[str] = []
        self._ids = itertools.count()
        self._replaying = False

    @property
    def registry(self) -> SurfaceRegistry:
        return self._registry

    @property
    def allow_extra_calls(self) -> bool:
        if self._allow_extra_calls is None:
            return self._settings.ALLOW_EXTRA_CALLS
        return self._allow_extra_calls

    @property
    def repr_limit(self) -> int:
        return self._settings.MESSAGE_REPR_LIMIT

    @property
    def is_replaying(self) -> bool:
        return self._replaying

    @property
    def chains(self) -> List[ExpectationChain]:
        return list(self._chains.values())

    def record(self, surface_name: str) -> ChainRecorder:
        """Open a new root chain and return its recorder."""
        recorder = self.open_chain(surface_name)
        self._root_ids.append(recorder.chain.chain_id)
        return recorder

    def open_chain(self, surface_name: str) -> ChainRecorder:
        if self._replaying:
            raise RecordingClosedError(
                exception_constants.RECORDING_CLOSED.format(chain=surface_name)
            )
        surface = self._registry.get(surface_name)
        chain = ExpectationChain(
            chain_id=f"{surface_name}#{next(self._ids)}", surface_name=surface_name
        )
        self._chains[chain.chain_id] = chain
        self._doubles[chain.chain_id] = ChainDouble(chain, self)
        logger.debug(f"Opened chain {chain.chain_id}")
        return ChainRecorder(chain, surface, self)

    def double_for(self, chain_id: str) -> ChainDouble:
        try:
            return self._doubles[chain_id]
        except KeyError:
            raise SurfaceConfigurationError(
                exception_constants.UNKNOWN_CHILD_CHAIN.format(chain=chain_id)
            ) from None

    def begin_replay(self) -> None:
        if self._replaying:
            return
        for chain in self._chains.values():
            chain.seal()
        self._replaying = True
        logger.debug(f"Replay started; sealed {len(self._chains)} chain(s)")

    def verify_complete(self) -> None:
        """Verify each root chain, in creation order, together with its children."""
        for chain_id in self._root_ids:
            self._doubles[chain_id].verify_complete()


def record_chain(
    surface_name: str,
    *,
    registry: Optional[SurfaceRegistry] = None,
    allow_extra_calls: Optional[bool] = None,
) -> ChainRecorder:
    """Shortcut: a fresh session with one root recorder."""
    return ChainSession(registry=registry, allow_extra_calls=allow_extra_calls).record(surface_name)
