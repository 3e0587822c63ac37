from abc import ABC, abstractmethod
from typing import Dict, List, Union

import inject
from httpx import AsyncClient, RequestError
from pydantic import TypeAdapter

from .exceptions import OrganizationHttpRequestException, OrganizationHttpResponseException
from .schemas import OrganizationDTO, OrganizationMetadataDTO

HEADER_NAME_CALLER_ID = "caller-id"

_organizations_adapter: TypeAdapter[List[OrganizationDTO]] = TypeAdapter(List[OrganizationDTO])


class OrganizationRepository(ABC):
    @abstractmethod
    async def find(self, identifier: str, base_url: str) -> List[OrganizationDTO]: ...  # pragma: no cover


class MockOrganizationRepository(OrganizationRepository):
    ORGANIZATIONS: List[OrganizationDTO] = [
        OrganizationDTO(
            code_value="00001",
            oid="1.2.246.562.10.00000000001",
            metadata=[
                OrganizationMetadataDTO(name="Mock koulu", short_name="Mock", language="FI"),
            ],
            parent_oid="1.2.246.562.10.00000000002",
            parent_name="Mock kunta",
            organization_type="oppilaitos",
        ),
        OrganizationDTO(
            oid="1.2.246.562.10.00000000003",
            metadata=[
                OrganizationMetadataDTO(name="Mock toimipiste", language="FI"),
            ],
            parent_oid="1.2.246.562.10.00000000001",
            parent_name="Mock koulu",
            organization_type="toimipiste",
        ),
    ]

    async def find(self, identifier: str, base_url: str) -> List[OrganizationDTO]:
        return [
            organization
            for organization in self.ORGANIZATIONS
            if identifier in (organization.code_value, organization.oid)
        ]


class ApiOrganizationRepository(OrganizationRepository):
    @inject.autoparams("client")
    def __init__(self, client: AsyncClient, caller_id: Union[str, None] = None) -> None:
        self.client = client
        self._caller_id = caller_id

    async def find(self, identifier: str, base_url: str) -> List[OrganizationDTO]:
        headers: Dict[str, str] = {}
        if self._caller_id is not None:
            headers[HEADER_NAME_CALLER_ID] = self._caller_id

        try:
            response = await self.client.get(f"{base_url}{identifier}", headers=headers)
        except RequestError as exc:
            raise OrganizationHttpRequestException(
                500,
                {
                    "error": "Error occurred while making request to the organization API",
                    "error_description": str(exc),
                },
            ) from exc

        if not 200 <= response.status_code < 300:
            raise OrganizationHttpResponseException(
                status_code=response.status_code,
                detail=f"Could not get organization information with id {identifier}",
            )

        try:
            return _organizations_adapter.validate_python(response.json())
        except ValueError as exc:
            raise OrganizationHttpResponseException(
                status_code=response.status_code,
                detail=f"Could not parse the organization response: {exc}",
            ) from exc
