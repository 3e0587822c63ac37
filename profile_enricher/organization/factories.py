from profile_enricher.config.schemas import OrganizationConfig, RepositoryType
from .repositories import (
    ApiOrganizationRepository,
    MockOrganizationRepository,
    OrganizationRepository,
)


class OrganizationRepositoryFactory:
    def __init__(self, organization_config: OrganizationConfig) -> None:
        self.config: OrganizationConfig = organization_config

    def create(self) -> OrganizationRepository:
        if self.config.organization_repository == RepositoryType.MOCK:
            return MockOrganizationRepository()

        elif self.config.organization_repository == RepositoryType.API:
            repository: ApiOrganizationRepository = ApiOrganizationRepository(
                caller_id=self.config.caller_id,
            )
            return repository

        else:
            raise NotImplementedError("Organization repository type not implemented yet.")
