from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Tuple


class ReceivedCall(NamedTuple):
    method_name: str
    args: Tuple[Any, ...]
    kwargs: Dict[str, Any]


class CallSpyMixin:
    """Collects (method_name, args, kwargs) for assertions."""

    def __init__(self) -> None:
        self.received_calls: List[ReceivedCall] = []

    def _touch(self, method_name: str, /, *args, **kwargs) -> ReceivedCall:
        call = ReceivedCall(method_name, args, kwargs)
        self.received_calls.append(call)
        return call
