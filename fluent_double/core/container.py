from dependency_injector import containers, providers

from fluent_double.core.config import settings
from fluent_double.service.session import ChainSession
from fluent_double.service.surface_registry import SurfaceRegistry


class Container(containers.DeclarativeContainer):
    """Dependency injection container"""

    # Configuration
    config = providers.Configuration()
    app_settings = providers.Object(settings)

    # Surfaces - one registry per container so per-test extensions stay local
    surface_registry = providers.Singleton(SurfaceRegistry)

    # Sessions - a fresh call tree every time
    chain_session = providers.Factory(
        ChainSession,
        registry=surface_registry,
        settings=app_settings,
        allow_extra_calls=config.ALLOW_EXTRA_CALLS,
    )
