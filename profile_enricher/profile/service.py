from logging import Logger
from typing import Mapping, Union

import inject

from .exceptions import ProfileHttpRequestException, ProfileHttpResponseException
from .mappers import SessionClaimsProfileMapper
from .repositories import ProfileRepository
from .schemas import Profile


class ProfileService:
    @inject.autoparams()
    def __init__(
        self,
        profile_repository: ProfileRepository,
        session_claims_mapper: SessionClaimsProfileMapper,
        logger: Logger,
    ) -> None:
        self._profile_repository: ProfileRepository = profile_repository
        self._session_claims_mapper: SessionClaimsProfileMapper = session_claims_mapper
        self.logger: Logger = logger

    def uses_session_claims(self, idp_id: str) -> bool:
        return self._session_claims_mapper.has_mappings(idp_id)

    def get_profile_from_session_claims(
        self, idp_id: str, session_claims: Mapping[str, str]
    ) -> Profile:
        self.logger.debug("The direct attribute mapping settings found for idp %s", idp_id)
        return self._session_claims_mapper.map(idp_id, session_claims)

    async def get_profile(self, idp_id: str, hook_value: str) -> Union[Profile, None]:
        try:
            return await self._profile_repository.find(idp_id, hook_value)

        except ProfileHttpRequestException as e:
            self.logger.error(f"Request error while requesting profile for idp {idp_id}: {e}")
            return None

        except ProfileHttpResponseException as e:
            self.logger.warning(f"No profile found for idp {idp_id}: {e}")
            return None
