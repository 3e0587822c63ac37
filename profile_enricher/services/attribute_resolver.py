import abc
import asyncio
from typing import Dict, List, Mapping, Sequence

import inject

from profile_enricher.enrichment.service import EnrichmentService


class AttributeResolver(abc.ABC):
    @abc.abstractmethod
    def resolve(
        self,
        identity_attributes: Mapping[str, Sequence[str]],
        session_claims: Mapping[str, str],
    ) -> Dict[str, List[str]]:
        pass


class ProfileAttributeResolver(AttributeResolver):
    @inject.autoparams()
    def __init__(self, enrichment_service: EnrichmentService) -> None:
        self.enrichment_service: EnrichmentService = enrichment_service

    def resolve(
        self,
        identity_attributes: Mapping[str, Sequence[str]],
        session_claims: Mapping[str, str],
    ) -> Dict[str, List[str]]:
        return asyncio.run(
            self.enrichment_service.resolve(identity_attributes, session_claims)
        )


class NoOpAttributeResolver(AttributeResolver):
    def resolve(
        self,
        identity_attributes: Mapping[str, Sequence[str]],
        session_claims: Mapping[str, str],
    ) -> Dict[str, List[str]]:
        return {}
