from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from fluent_double.core.exceptions import exception_constants
from fluent_double.core.exceptions.base import UnsupportedMethodError
from fluent_double.models.expectation import ExpectationChain, ReturnDirective
from fluent_double.models.surface import MethodRole, MethodSurface
from fluent_double.service.formatting import format_call

if TYPE_CHECKING:  # pragma: no cover
    from fluent_double.service.double import ChainDouble
    from fluent_double.service.session import ChainSession

logger = logging.getLogger(__name__)


class ChainRecorder:
    """
    Setup-time mirror of a fluent API.

    Drive it through the exact chain the code under test should perform:

        builder = session.record("query_builder")
        query = builder.select("a", "b").field("c").equals("USA").get_query()
        query.execute().terminal("OK")
    """

    def __init__(self, chain: ExpectationChain, surface: MethodSurface, session: "ChainSession"):
        self._chain = chain
        self._surface = surface
        self._session = session

    @property
    def chain(self) -> ExpectationChain:
        return self._chain

    @property
    def surface(self) -> MethodSurface:
        return self._surface

    @property
    def session(self) -> "ChainSession":
        return self._session

    @property
    def double(self) -> "ChainDouble":
        """The replay view over this recorder's chain."""
        return self._session.double_for(self._chain.chain_id)

    def __getattr__(self, name: str) -> Callable[..., "ChainRecorder"]:
        if name.startswith("_"):
            raise AttributeError(name)
        self._require_supported(name)

        def _record(*args, **kwargs):
            return self.record(name, *args, **kwargs)

        _record.__name__ = name
        return _record

    def __repr__(self) -> str:
        return f"<ChainRecorder {self._chain.chain_id} ({len(self._chain)} calls)>"

    def record(self, method_name: str, /, *args, **kwargs) -> "ChainRecorder":
        spec = self._require_supported(method_name)

        if spec.role is MethodRole.CHILD:
            child = self._session.open_chain(spec.child_surface)
            self._chain.append(
                method_name, args, kwargs,
                ReturnDirective.returns_chain_child(child.chain.chain_id),
            )
            self._log_recorded(method_name, args, kwargs)
            return child

        if spec.role is MethodRole.TERMINAL:
            directive = ReturnDirective.returns_literal(spec.default_value)
        else:
            directive = ReturnDirective.returns_self()
        self._chain.append(method_name, args, kwargs, directive)
        self._log_recorded(method_name, args, kwargs)
        return self

    def terminal(self, value: Any) -> "ChainRecorder":
        """Make the most recently recorded call return ``value`` when replayed."""
        self._chain.set_last_directive(ReturnDirective.returns_literal(value))
        return self

    def raises(self, exception: BaseException) -> "ChainRecorder":
        """Make the most recently recorded call raise ``exception`` when replayed."""
        self._chain.set_last_directive(ReturnDirective.raising(exception))
        return self

    # ---- helpers -------------------------------------------------------------
    def _require_supported(self, method_name: str):
        spec = self._surface.spec_for(method_name)
        if spec is None:
            raise UnsupportedMethodError(
                exception_constants.UNSUPPORTED_METHOD.format(
                    method=method_name,
                    surface=self._surface.name,
                    allowed=", ".join(self._surface.method_names),
                ),
                method_name=method_name,
                surface_name=self._surface.name,
            )
        return spec

    def _log_recorded(self, method_name: str, args: tuple, kwargs: dict) -> None:
        logger.debug(
            f"Chain {self._chain.chain_id} #{len(self._chain) - 1}: recorded "
            f"{format_call(method_name, args, kwargs, self._session.repr_limit)}"
        )
