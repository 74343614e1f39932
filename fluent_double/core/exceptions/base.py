"""
Exception classes raised while recording and replaying fluent call chains.

Every failure derives from ``AssertionError`` so that the host test runner
reports a mismatched call as a plain test failure.
"""
from typing import Any, Optional


class FluentDoubleBaseException(AssertionError):
    """Base exception for all fluent-double failures"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        internal_context: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.internal_context = internal_context or {}


class UnsupportedMethodError(FluentDoubleBaseException):
    """Recorded method is not on the surface allow-list"""

    def __init__(self, message: str, method_name: str, surface_name: str):
        super().__init__(
            message,
            internal_context={"method": method_name, "surface": surface_name},
        )
        self.method_name = method_name
        self.surface_name = surface_name


class ReplayError(FluentDoubleBaseException):
    """Replayed call did not satisfy the recorded chain"""

    def __init__(self, message: str, chain_id: str, position: Optional[int] = None, **context: Any):
        super().__init__(
            message,
            internal_context={"chain": chain_id, "position": position, **context},
        )
        self.chain_id = chain_id
        self.position = position


class MethodMismatchError(ReplayError):
    """A different method was called than the one expected at this position"""

    def __init__(self, message: str, chain_id: str, position: int, expected: str, actual: str):
        super().__init__(message, chain_id, position, expected=expected, actual=actual)
        self.expected = expected
        self.actual = actual


class ArgumentCountMismatchError(ReplayError):
    """Positional count or keyword names differ from the recorded call"""

    def __init__(self, message: str, chain_id: str, position: int, expected: Any, actual: Any):
        super().__init__(message, chain_id, position, expected=expected, actual=actual)
        self.expected = expected
        self.actual = actual


class ArgumentMismatchError(ReplayError):
    """A non-wildcard argument value differs from the recorded one"""

    def __init__(
        self,
        message: str,
        chain_id: str,
        position: int,
        argument: int | str,
        expected: Any,
        actual: Any,
    ):
        super().__init__(
            message, chain_id, position, argument=argument, expected=expected, actual=actual
        )
        self.argument = argument
        self.expected = expected
        self.actual = actual


class UnexpectedExtraCallError(ReplayError):
    """Call received after every expectation was consumed"""

    def __init__(self, message: str, chain_id: str, position: int, method_name: str):
        super().__init__(message, chain_id, position, method=method_name)
        self.method_name = method_name


class IncompleteChainError(ReplayError):
    """Expected calls were never made by the code under test"""

    def __init__(self, message: str, chain_id: str, position: int, remaining: list):
        super().__init__(message, chain_id, position, remaining=remaining)
        self.remaining = remaining


class RecordingError(FluentDoubleBaseException):
    """Recorder used incorrectly"""
    pass


class RecordingClosedError(RecordingError):
    """Recording attempted after replay started"""
    pass


class SurfaceConfigurationError(FluentDoubleBaseException):
    """Invalid method surface definition or lookup"""
    pass
