from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from fluent_double.core.exceptions import exception_constants
from fluent_double.core.exceptions.base import RecordingClosedError, RecordingError


class ReturnKind(str, Enum):
    SELF = "self"
    CHAIN_CHILD = "chain_child"
    LITERAL = "literal"
    RAISES = "raises"


class ReturnDirective(BaseModel):
    """What a replayed call hands back to the code under test."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ReturnKind = ReturnKind.SELF
    value: Any = Field(default=None, description="Returned as-is for LITERAL")
    child_chain_id: Optional[str] = Field(
        default=None,
        description="Identifier of the child chain for CHAIN_CHILD; resolved by the session",
    )
    exception: Optional[BaseException] = Field(default=None, description="Raised for RAISES")

    @model_validator(mode="after")
    def _check_payload(self) -> "ReturnDirective":
        if self.kind is ReturnKind.CHAIN_CHILD and not self.child_chain_id:
            raise ValueError("CHAIN_CHILD directive requires child_chain_id")
        if self.kind is ReturnKind.RAISES and self.exception is None:
            raise ValueError("RAISES directive requires an exception instance")
        return self

    @property
    def is_terminal(self) -> bool:
        return self.kind in (ReturnKind.LITERAL, ReturnKind.RAISES)

    @classmethod
    def returns_self(cls) -> "ReturnDirective":
        return cls(kind=ReturnKind.SELF)

    @classmethod
    def returns_chain_child(cls, child_chain_id: str) -> "ReturnDirective":
        return cls(kind=ReturnKind.CHAIN_CHILD, child_chain_id=child_chain_id)

    @classmethod
    def returns_literal(cls, value: Any) -> "ReturnDirective":
        return cls(kind=ReturnKind.LITERAL, value=value)

    @classmethod
    def raising(cls, exception: BaseException) -> "ReturnDirective":
        return cls(kind=ReturnKind.RAISES, exception=exception)


class Expectation(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    sequence_index: int = Field(ge=0)
    method_name: str
    expected_args: Tuple[Any, ...] = ()
    expected_kwargs: Dict[str, Any] = Field(default_factory=dict)
    return_directive: ReturnDirective = Field(default_factory=ReturnDirective.returns_self)


class ExpectationChain(BaseModel):
    """
    Ordered expectations plus the replay cursor.

    Grows only while recording; once sealed, only the cursor moves.
    """

    model_config = ConfigDict(validate_assignment=True)

    chain_id: str = Field(default_factory=lambda: uuid4().hex[:12])
    surface_name: str
    expectations: List[Expectation] = Field(default_factory=list)
    next_expected_index: int = Field(default=0, ge=0)
    sealed: bool = False

    # ---- computed properties --------------------------------------------------
    @computed_field
    @property
    def is_exhausted(self) -> bool:
        return self.next_expected_index >= len(self.expectations)

    @property
    def remaining(self) -> List[Expectation]:
        return self.expectations[self.next_expected_index:]

    def __len__(self) -> int:
        return len(self.expectations)

    # ---- recording -----------------------------------------------------------
    def append(
        self,
        method_name: str,
        args: Tuple[Any, ...] = (),
        kwargs: Optional[Dict[str, Any]] = None,
        directive: Optional[ReturnDirective] = None,
    ) -> Expectation:
        if self.sealed:
            raise RecordingClosedError(
                exception_constants.RECORDING_CLOSED.format(chain=self.chain_id)
            )
        expectation = Expectation(
            sequence_index=len(self.expectations),
            method_name=method_name,
            expected_args=tuple(args),
            expected_kwargs=dict(kwargs or {}),
            return_directive=directive or ReturnDirective.returns_self(),
        )
        self.expectations.append(expectation)
        return expectation

    def set_last_directive(self, directive: ReturnDirective) -> Expectation:
        if self.sealed:
            raise RecordingClosedError(
                exception_constants.RECORDING_CLOSED.format(chain=self.chain_id)
            )
        if not self.expectations:
            raise RecordingError(
                exception_constants.TERMINAL_ON_EMPTY_CHAIN.format(chain=self.chain_id)
            )
        last = self.expectations[-1]
        last.return_directive = directive
        return last

    # ---- replay --------------------------------------------------------------
    def seal(self) -> None:
        self.sealed = True

    def current(self) -> Optional[Expectation]:
        if self.is_exhausted:
            return None
        return self.expectations[self.next_expected_index]

    def advance(self) -> None:
        self.next_expected_index += 1
