from logging import Logger

import pytest
from pytest_mock import MockerFixture

from profile_enricher.config.schemas import Config
from profile_enricher.profile.exceptions import (
    ProfileHttpRequestException,
    ProfileHttpResponseException,
)
from profile_enricher.profile.mappers import SessionClaimsProfileMapper
from profile_enricher.profile.repositories import ProfileRepository
from profile_enricher.profile.schemas import Profile
from profile_enricher.profile.service import ProfileService

IDP_ID = "https://idp.example.org/idp"


@pytest.fixture
def profile_repository(mocker: MockerFixture) -> ProfileRepository:
    return mocker.AsyncMock(ProfileRepository)


@pytest.fixture
def profile_service(
    profile_repository: ProfileRepository, config: Config, logger: Logger
) -> ProfileService:
    return ProfileService(
        profile_repository=profile_repository,
        session_claims_mapper=SessionClaimsProfileMapper(config=config, logger=logger),
        logger=logger,
    )


class TestProfileService:
    def test_uses_session_claims(self, profile_service: ProfileService) -> None:
        assert profile_service.uses_session_claims(IDP_ID)
        assert not profile_service.uses_session_claims("https://other.example.org/idp")

    def test_get_profile_from_session_claims(
        self, profile_service: ProfileService, profile_repository: ProfileRepository
    ) -> None:
        profile = profile_service.get_profile_from_session_claims(IDP_ID, {"givenName": "Maija"})

        assert profile.first_name == "Maija"
        profile_repository.find.assert_not_called()  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    async def test_get_profile(
        self, profile_service: ProfileService, profile_repository: ProfileRepository
    ) -> None:
        expected = Profile(username="MPASSOID.abc")
        profile_repository.find.return_value = expected  # type: ignore[attr-defined]

        assert await profile_service.get_profile("idp", "abc") is expected
        profile_repository.find.assert_called_once_with("idp", "abc")  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    async def test_get_profile_with_request_error(
        self,
        profile_service: ProfileService,
        profile_repository: ProfileRepository,
        logger: Logger,
    ) -> None:
        profile_repository.find.side_effect = ProfileHttpRequestException(  # type: ignore[attr-defined]
            500, {"error": "Connection refused"}
        )

        assert await profile_service.get_profile("idp", "abc") is None
        logger.error.assert_called_once()  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    async def test_get_profile_with_response_error(
        self,
        profile_service: ProfileService,
        profile_repository: ProfileRepository,
        logger: Logger,
    ) -> None:
        profile_repository.find.side_effect = ProfileHttpResponseException(  # type: ignore[attr-defined]
            404, "No profile found"
        )

        assert await profile_service.get_profile("idp", "abc") is None
        logger.warning.assert_called_once()  # type: ignore[attr-defined]
