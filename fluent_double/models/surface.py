import keyword
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from fluent_double.core.exceptions import exception_constants
from fluent_double.core.exceptions.base import SurfaceConfigurationError


class MethodRole(str, Enum):
    SELF = "self"
    CHILD = "child"
    TERMINAL = "terminal"


class MethodSpec(BaseModel):
    """Default return directive for one allowed method."""

    model_config = ConfigDict(frozen=True)

    role: MethodRole = MethodRole.SELF
    child_surface: Optional[str] = Field(
        default=None, description="Surface of the object a CHILD method hands off to"
    )
    default_value: Any = Field(
        default=None, description="What a TERMINAL method returns until terminal() overrides it"
    )


class MethodSurface(BaseModel):
    """
    Explicit allow-list of method names for one kind of fluent object.

    Surfaces are immutable; ``extend`` returns a new surface so the built-in
    ones can be grown per test without leaking between tests.
    """

    model_config = ConfigDict(frozen=True)

    # Attribute names the recorder/double already use for themselves. A double
    # replays any other public name, so calling one of these on a double does
    # not go through replay.
    RESERVED: ClassVar[FrozenSet[str]] = frozenset(
        {
            "record", "terminal", "raises", "double", "chain", "session", "surface",
            "invoke", "verify_complete", "received_calls", "extra_calls",
        }
    )

    name: str = Field(..., min_length=1)
    methods: Dict[str, MethodSpec] = Field(default_factory=dict)

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        self._check_methods()

    def _check_methods(self) -> None:
        for method_name, spec in self.methods.items():
            if (
                not method_name.isidentifier()
                or keyword.iskeyword(method_name)
                or method_name.startswith("_")
            ):
                raise SurfaceConfigurationError(
                    exception_constants.INVALID_METHOD_NAME.format(
                        method=method_name, surface=self.name
                    )
                )
            if method_name in self.RESERVED:
                raise SurfaceConfigurationError(
                    exception_constants.RESERVED_METHOD_NAME.format(
                        method=method_name, surface=self.name
                    )
                )
            if spec.role is MethodRole.CHILD and not spec.child_surface:
                raise SurfaceConfigurationError(
                    exception_constants.CHILD_SURFACE_REQUIRED.format(
                        method=method_name, surface=self.name
                    )
                )

    def __contains__(self, method_name: object) -> bool:
        return method_name in self.methods

    def spec_for(self, method_name: str) -> Optional[MethodSpec]:
        return self.methods.get(method_name)

    @property
    def method_names(self) -> list[str]:
        return sorted(self.methods)

    def extend(self, *self_methods: str, **specs: MethodSpec | str) -> "MethodSurface":
        """
        Return a copy with more methods allowed.

        Positional names default to chaining on self; keyword values may be a
        MethodSpec or a role name ("self", "terminal").
        """
        methods = dict(self.methods)
        for method_name in self_methods:
            methods[method_name] = MethodSpec()
        for method_name, spec in specs.items():
            methods[method_name] = spec if isinstance(spec, MethodSpec) else MethodSpec(role=spec)
        return MethodSurface(name=self.name, methods=methods)

    @classmethod
    def from_mapping(cls, name: str, mapping: Mapping[str, Any]) -> "MethodSurface":
        """
        Build a surface from plain data, e.g. loaded from a config file:

            {"select": "self", "get_query": {"role": "child", "child_surface": "query"},
             "execute": "terminal"}
        """
        methods: Dict[str, MethodSpec] = {}
        for method_name, raw in mapping.items():
            if isinstance(raw, MethodSpec):
                methods[method_name] = raw
            elif isinstance(raw, (str, MethodRole)):
                methods[method_name] = MethodSpec(role=raw)
            else:
                methods[method_name] = MethodSpec.model_validate(raw)
        return cls(name=name, methods=methods)
