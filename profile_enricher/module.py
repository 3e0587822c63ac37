import inject
from dependency_injector import providers
from dependency_injector.providers import Singleton

from .bindings import configure_bindings
from .dependency_injection.container import Container
from .services.attribute_resolver import ProfileAttributeResolver

PROVIDER_NAME = "profile"


def init_module(container: Container, config_file: str = "enricher.conf") -> None:
    if not inject.is_configured():
        inject.configure(
            lambda binder: configure_bindings(binder=binder, config_file=config_file)
        )

    inject_profile_attribute_resolver(container=container)


def inject_profile_attribute_resolver(container: Container) -> None:
    profile_attribute_resolver: Singleton[ProfileAttributeResolver] = providers.Singleton(
        ProfileAttributeResolver,
    )

    resolver_providers = container.attribute_resolver.providers.copy()  # type: ignore[attr-defined]
    resolver_providers[PROVIDER_NAME] = profile_attribute_resolver

    attribute_resolver = providers.Selector(
        selector=container.config.app.attribute_resolver, **resolver_providers
    )

    container.attribute_resolver.override(attribute_resolver)
