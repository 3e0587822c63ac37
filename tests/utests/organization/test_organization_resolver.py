from logging import Logger

import pytest
from pytest_mock import MockerFixture

from profile_enricher.config.schemas import Config
from profile_enricher.organization.exceptions import (
    OrganizationHttpRequestException,
    OrganizationHttpResponseException,
)
from profile_enricher.organization.repositories import (
    MockOrganizationRepository,
    OrganizationRepository,
)
from profile_enricher.organization.schemas import OrganizationDTO, OrganizationMetadataDTO
from profile_enricher.organization.service import OrganizationResolver


@pytest.fixture
def organization_repository(mocker: MockerFixture) -> OrganizationRepository:
    return mocker.AsyncMock(OrganizationRepository)


@pytest.fixture
def resolver(
    organization_repository: OrganizationRepository, config: Config, logger: Logger
) -> OrganizationResolver:
    return OrganizationResolver(
        organization_repository=organization_repository, config=config, logger=logger
    )


@pytest.mark.parametrize(
    "identifier, valid",
    [
        ("12345", True),
        ("123456", True),
        ("1234567", False),
        ("1.2.246.562.10.00000000001", True),
        ("Mock koulu", False),
        (None, False),
    ],
)
def test_is_valid_identifier(identifier, valid: bool) -> None:
    assert OrganizationResolver.is_valid_identifier(identifier) is valid


class TestOrganizationResolver:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("identifier", [None, "", "  ", "1234567", "Mock koulu"])
    async def test_invalid_identifier_is_rejected_without_request(
        self,
        resolver: OrganizationResolver,
        organization_repository: OrganizationRepository,
        identifier,
    ) -> None:
        assert await resolver.resolve(identifier) is None
        organization_repository.find.assert_not_called()  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    async def test_resolve(
        self,
        resolver: OrganizationResolver,
        organization_repository: OrganizationRepository,
        config: Config,
    ) -> None:
        organization_repository.find.return_value = [  # type: ignore[attr-defined]
            OrganizationDTO(
                code_value="00001",
                oid="1.2.246.562.10.00000000001",
                metadata=[
                    OrganizationMetadataDTO(name="Mock skola", language="SV"),
                    OrganizationMetadataDTO(name="Mock koulu", language="FI"),
                ],
                parent_oid="1.2.246.562.10.00000000002",
                parent_name="Mock kunta",
                organization_type="oppilaitos",
            )
        ]

        organization = await resolver.resolve(" 00001 ")

        assert organization is not None
        assert organization.id == "00001"
        assert organization.oid == "1.2.246.562.10.00000000001"
        assert organization.name == "Mock koulu"
        assert organization.parent_oid == "1.2.246.562.10.00000000002"
        assert organization.parent_name == "Mock kunta"
        assert organization.organization_type == "oppilaitos"
        organization_repository.find.assert_called_once_with(  # type: ignore[attr-defined]
            "00001", config.organization.base_url
        )

    @pytest.mark.asyncio
    async def test_resolve_with_base_url(
        self,
        resolver: OrganizationResolver,
        organization_repository: OrganizationRepository,
    ) -> None:
        organization_repository.find.return_value = []  # type: ignore[attr-defined]

        await resolver.resolve("1.2.246.562.10.00000000001", "https://example.org/")

        organization_repository.find.assert_called_once_with(  # type: ignore[attr-defined]
            "1.2.246.562.10.00000000001", "https://example.org/"
        )

    @pytest.mark.asyncio
    async def test_name_falls_back_to_first_metadata(
        self,
        resolver: OrganizationResolver,
        organization_repository: OrganizationRepository,
    ) -> None:
        organization_repository.find.return_value = [  # type: ignore[attr-defined]
            OrganizationDTO(
                code_value="00001",
                metadata=[OrganizationMetadataDTO(name="Mock skola", language="SV")],
            )
        ]

        organization = await resolver.resolve("00001")

        assert organization is not None
        assert organization.name == "Mock skola"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "organizations",
        [
            [],
            [OrganizationDTO(code_value="00001", metadata=[])],
            [OrganizationDTO(code_value="00001")],
            [
                OrganizationDTO(code_value="00001", metadata=[OrganizationMetadataDTO(name="a")]),
                OrganizationDTO(code_value="00001", metadata=[OrganizationMetadataDTO(name="b")]),
            ],
        ],
    )
    async def test_unusable_response(
        self,
        resolver: OrganizationResolver,
        organization_repository: OrganizationRepository,
        organizations,
    ) -> None:
        organization_repository.find.return_value = organizations  # type: ignore[attr-defined]

        assert await resolver.resolve("00001") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exception",
        [
            OrganizationHttpRequestException(500, "connection refused"),
            OrganizationHttpResponseException(404, "not found"),
        ],
    )
    async def test_repository_errors_are_logged(
        self,
        resolver: OrganizationResolver,
        organization_repository: OrganizationRepository,
        logger: Logger,
        exception: Exception,
    ) -> None:
        organization_repository.find.side_effect = exception  # type: ignore[attr-defined]

        assert await resolver.resolve("00001") is None
        logger.warning.assert_called_once()  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    async def test_resolve_from_mock_repository(self, config: Config, logger: Logger) -> None:
        resolver = OrganizationResolver(
            organization_repository=MockOrganizationRepository(), config=config, logger=logger
        )

        school = await resolver.resolve("00001")
        office = await resolver.resolve("1.2.246.562.10.00000000003")

        assert school is not None and school.name == "Mock koulu"
        assert office is not None and office.organization_type == "toimipiste"
