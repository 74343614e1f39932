from .core.config import FluentDoubleSettings, LogLevel, apply_log_level, settings
from .core.exceptions import exception_constants
from .core.exceptions.base import (
    ArgumentCountMismatchError,
    ArgumentMismatchError,
    FluentDoubleBaseException,
    IncompleteChainError,
    MethodMismatchError,
    RecordingClosedError,
    RecordingError,
    ReplayError,
    SurfaceConfigurationError,
    UnexpectedExtraCallError,
    UnsupportedMethodError,
)
from .models.expectation import Expectation, ExpectationChain, ReturnDirective, ReturnKind
from .models.surface import MethodRole, MethodSpec, MethodSurface
from .service.double import ChainDouble
from .service.matching import ANY, values_match
from .service.recorder import ChainRecorder
from .service.session import ChainSession, record_chain
from .service.spy import ReceivedCall
from .service.surface_registry import BUILTIN_SURFACES, SurfaceRegistry


__all__ = [

    # core/
    "FluentDoubleSettings",
    "LogLevel",
    "apply_log_level",
    "settings",

    # exceptions/
    "exception_constants",
    "FluentDoubleBaseException",
    "UnsupportedMethodError",
    "ReplayError",
    "MethodMismatchError",
    "ArgumentCountMismatchError",
    "ArgumentMismatchError",
    "UnexpectedExtraCallError",
    "IncompleteChainError",
    "RecordingError",
    "RecordingClosedError",
    "SurfaceConfigurationError",

    # models/
    "Expectation",
    "ExpectationChain",
    "ReturnDirective",
    "ReturnKind",
    "MethodRole",
    "MethodSpec",
    "MethodSurface",

    # service/
    "ANY",
    "values_match",
    "ChainDouble",
    "ChainRecorder",
    "ChainSession",
    "ReceivedCall",
    "record_chain",
    "SurfaceRegistry",
    "BUILTIN_SURFACES",
]
