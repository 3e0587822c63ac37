from profile_enricher.config.schemas import ProfileConfig, RepositoryType
from .repositories import ApiProfileRepository, MockProfileRepository, ProfileRepository


class ProfileRepositoryFactory:
    def __init__(self, profile_config: ProfileConfig) -> None:
        self.config: ProfileConfig = profile_config

    def create(self) -> ProfileRepository:
        if self.config.profile_repository == RepositoryType.MOCK:
            return MockProfileRepository()

        elif self.config.profile_repository == RepositoryType.API:
            assert self.config.endpoint_url is not None
            assert self.config.token is not None
            repository: ApiProfileRepository = ApiProfileRepository(
                endpoint_url=self.config.endpoint_url,
                token=self.config.token,
            )
            return repository

        else:
            raise NotImplementedError("Profile repository type not implemented yet.")
