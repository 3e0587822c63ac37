# pylint: disable=c-extension-no-member, too-few-public-methods
from dependency_injector import containers, providers

from profile_enricher.services.attribute_resolver import NoOpAttributeResolver


class Container(containers.DeclarativeContainer):
    """
    Host container exposing the attribute resolver selected by
    `app.attribute_resolver`. Enricher modules register their resolvers into it.
    """

    config = providers.Configuration()

    attribute_resolver = providers.Selector(
        config.app.attribute_resolver,
        noop=providers.Singleton(NoOpAttributeResolver),
    )
