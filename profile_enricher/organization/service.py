from logging import Logger
from typing import List, Union

import inject

from profile_enricher.config.schemas import Config
from profile_enricher.utils import is_numeric, trim_or_none
from .exceptions import OrganizationHttpRequestException, OrganizationHttpResponseException
from .repositories import OrganizationRepository
from .schemas import Organization, OrganizationDTO

MAX_NUMERIC_IDENTIFIER_LENGTH = 6


class OrganizationResolver:
    @inject.autoparams()
    def __init__(
        self,
        organization_repository: OrganizationRepository,
        config: Config,
        logger: Logger,
    ) -> None:
        self._organization_repository: OrganizationRepository = organization_repository
        self._base_url: str = config.organization.base_url
        self._primary_language: str = config.organization.primary_language
        self.logger: Logger = logger

    @staticmethod
    def is_valid_identifier(identifier: Union[str, None]) -> bool:
        """
        Accepts school codes of at most six digits and dotted organization oids.
        """
        if identifier is None:
            return False

        if is_numeric(identifier):
            return len(identifier) <= MAX_NUMERIC_IDENTIFIER_LENGTH

        return "." in identifier

    async def resolve(
        self, identifier: Union[str, None], base_url: Union[str, None] = None
    ) -> Union[Organization, None]:
        trimmed_identifier = trim_or_none(identifier)
        if not self.is_valid_identifier(trimmed_identifier):
            self.logger.debug("Not resolving organization for identifier %s", identifier)
            return None

        assert trimmed_identifier is not None
        try:
            organizations: List[OrganizationDTO] = await self._organization_repository.find(
                trimmed_identifier, base_url or self._base_url
            )

        except OrganizationHttpRequestException as e:
            self.logger.warning(
                f"Request error while requesting organization {trimmed_identifier}: {e}"
            )
            return None

        except OrganizationHttpResponseException as e:
            self.logger.warning(
                f"Response error while requesting organization {trimmed_identifier}: {e}"
            )
            return None

        if len(organizations) != 1 or not organizations[0].metadata:
            self.logger.warning("Could not find organization for id %s", trimmed_identifier)
            return None

        self.logger.debug("Successfully fetched information for id %s", trimmed_identifier)
        return Organization.from_organization_dto(organizations[0], self._primary_language)
