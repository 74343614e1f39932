import logging
from typing import Dict, Iterable, Optional

from fluent_double.core.exceptions import exception_constants
from fluent_double.core.exceptions.base import SurfaceConfigurationError
from fluent_double.models.surface import MethodSurface
from fluent_double.surfaces.postgrest import postgrest_client_surface, postgrest_request_surface
from fluent_double.surfaces.query_builder import query_builder_surface, query_surface

logger = logging.getLogger(__name__)

BUILTIN_SURFACES = (
    query_builder_surface,
    query_surface,
    postgrest_client_surface,
    postgrest_request_surface,
)


class SurfaceRegistry:
    """Named method surfaces available to sessions."""

    def __init__(self, surfaces: Optional[Iterable[MethodSurface]] = None):
        self._surfaces: Dict[str, MethodSurface] = {}
        for surface in surfaces if surfaces is not None else BUILTIN_SURFACES:
            self.register(surface)

    def register(self, surface: MethodSurface, *, replace: bool = False) -> MethodSurface:
        if surface.name in self._surfaces and not replace:
            raise SurfaceConfigurationError(
                exception_constants.DUPLICATE_SURFACE.format(surface=surface.name)
            )
        self._surfaces[surface.name] = surface
        logger.debug(f"Registered surface '{surface.name}' with {len(surface.methods)} methods")
        return surface

    def get(self, name: str) -> MethodSurface:
        try:
            return self._surfaces[name]
        except KeyError:
            raise SurfaceConfigurationError(
                exception_constants.UNKNOWN_SURFACE.format(surface=name)
            ) from None

    def extend(self, name: str, *self_methods: str, **specs) -> MethodSurface:
        """Grow a registered surface in place (for this registry only)."""
        return self.register(self.get(name).extend(*self_methods, **specs), replace=True)

    def __contains__(self, name: object) -> bool:
        return name in self._surfaces

    @property
    def names(self) -> list[str]:
        return sorted(self._surfaces)
