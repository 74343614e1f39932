from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, List

from fluent_double.core.exceptions import exception_constants
from fluent_double.core.exceptions.base import (
    ArgumentCountMismatchError,
    ArgumentMismatchError,
    IncompleteChainError,
    MethodMismatchError,
    UnexpectedExtraCallError,
)
from fluent_double.models.expectation import Expectation, ExpectationChain, ReturnKind
from fluent_double.service.formatting import (
    format_arity,
    format_call,
    format_chain,
    format_expectation,
    format_value,
)
from fluent_double.service.matching import first_mismatch
from fluent_double.service.spy import CallSpyMixin, ReceivedCall

if TYPE_CHECKING:  # pragma: no cover
    from fluent_double.service.session import ChainSession

logger = logging.getLogger(__name__)


class ChainDouble(CallSpyMixin):
    """
    Stand-in for the real fluent object.

    Every public attribute is a method of the wrapped API; calling it replays
    the call against the next unconsumed expectation of the chain.
    """

    def __init__(self, chain: ExpectationChain, session: "ChainSession") -> None:
        super().__init__()
        self._chain = chain
        self._session = session
        self.extra_calls: List[ReceivedCall] = []

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)

        def _replay(*args, **kwargs):
            return self.invoke(name, *args, **kwargs)

        _replay.__name__ = name
        return _replay

    def __repr__(self) -> str:
        return (
            f"<ChainDouble {self._chain.chain_id} "
            f"{self._chain.next_expected_index}/{len(self._chain)}>"
        )

    def invoke(self, method_name: str, /, *args, **kwargs) -> Any:
        self._session.begin_replay()
        call = self._touch(method_name, *args, **kwargs)
        position = self._chain.next_expected_index
        expectation = self._chain.current()

        if expectation is None:
            return self._extra_call(call, position)

        self._check_call(expectation, call, position)
        self._chain.advance()
        logger.debug(
            f"Chain {self._chain.chain_id} #{position}: "
            f"{format_call(method_name, args, kwargs, self._limit)} matched"
        )
        return self._resolve(expectation)

    def verify_complete(self) -> None:
        """Check this chain, then every child chain it hands off to, in recorded order."""
        self._verify_own_chain()
        for expectation in self._chain.expectations:
            directive = expectation.return_directive
            if directive.kind is ReturnKind.CHAIN_CHILD:
                self._session.double_for(directive.child_chain_id).verify_complete()

    # ---- helpers -------------------------------------------------------------
    def _verify_own_chain(self) -> None:
        if self._chain.is_exhausted:
            logger.info(f"Chain {self._chain.chain_id} complete ({len(self._chain)} calls)")
            return
        remaining = self._chain.remaining
        raise IncompleteChainError(
            exception_constants.INCOMPLETE_CHAIN.format(
                chain=self._chain.chain_id,
                count=len(remaining),
                remaining=format_chain(remaining, self._limit),
            ),
            chain_id=self._chain.chain_id,
            position=self._chain.next_expected_index,
            remaining=[format_expectation(e, self._limit) for e in remaining],
        )

    @property
    def _limit(self) -> int:
        return self._session.repr_limit

    def _extra_call(self, call: ReceivedCall, position: int) -> "ChainDouble":
        rendered = format_call(call.method_name, call.args, call.kwargs, self._limit)
        if not self._session.allow_extra_calls:
            raise UnexpectedExtraCallError(
                exception_constants.UNEXPECTED_EXTRA_CALL.format(
                    chain=self._chain.chain_id, total=len(self._chain), actual=rendered
                ),
                chain_id=self._chain.chain_id,
                position=position,
                method_name=call.method_name,
            )
        logger.warning(f"Chain {self._chain.chain_id} absorbed extra call {rendered}")
        self.extra_calls.append(call)
        return self

    def _check_call(self, expectation: Expectation, call: ReceivedCall, position: int) -> None:
        chain_id = self._chain.chain_id

        if call.method_name != expectation.method_name:
            raise MethodMismatchError(
                exception_constants.METHOD_MISMATCH.format(
                    position=position,
                    chain=chain_id,
                    expected=format_expectation(expectation, self._limit),
                    actual=format_call(call.method_name, call.args, call.kwargs, self._limit),
                ),
                chain_id=chain_id,
                position=position,
                expected=expectation.method_name,
                actual=call.method_name,
            )

        expected_args = expectation.expected_args
        expected_kwargs = expectation.expected_kwargs
        if len(call.args) != len(expected_args) or set(call.kwargs) != set(expected_kwargs):
            raise ArgumentCountMismatchError(
                exception_constants.ARGUMENT_COUNT_MISMATCH.format(
                    position=position,
                    chain=chain_id,
                    method=call.method_name,
                    expected=format_arity(expected_args, expected_kwargs),
                    actual=format_arity(call.args, call.kwargs),
                ),
                chain_id=chain_id,
                position=position,
                expected=(len(expected_args), tuple(sorted(expected_kwargs))),
                actual=(len(call.args), tuple(sorted(call.kwargs))),
            )

        argument = first_mismatch(expected_args, expected_kwargs, call.args, call.kwargs)
        if argument is None:
            return
        if isinstance(argument, int):
            expected, actual = expected_args[argument], call.args[argument]
        else:
            expected, actual = expected_kwargs[argument], call.kwargs[argument]
        raise ArgumentMismatchError(
            exception_constants.ARGUMENT_MISMATCH.format(
                position=position,
                chain=chain_id,
                method=call.method_name,
                argument=argument,
                expected=format_value(expected, self._limit),
                actual=format_value(actual, self._limit),
            ),
            chain_id=chain_id,
            position=position,
            argument=argument,
            expected=expected,
            actual=actual,
        )

    def _resolve(self, expectation: Expectation) -> Any:
        directive = expectation.return_directive
        if directive.kind is ReturnKind.SELF:
            return self
        if directive.kind is ReturnKind.CHAIN_CHILD:
            return self._session.double_for(directive.child_chain_id)
        if directive.kind is ReturnKind.RAISES:
            raise directive.exception
        return directive.value
