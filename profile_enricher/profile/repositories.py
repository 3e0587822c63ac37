from abc import ABC, abstractmethod

import inject
from httpx import AsyncClient, RequestError

from .exceptions import ProfileHttpRequestException, ProfileHttpResponseException
from .schemas import Claim, Profile, Role


class ProfileRepository(ABC):
    @abstractmethod
    async def find(self, idp_id: str, hook_value: str) -> Profile: ...  # pragma: no cover


class MockProfileRepository(ProfileRepository):
    async def find(self, idp_id: str, hook_value: str) -> Profile:
        return Profile(
            username=f"MPASSOID.{hook_value}",
            first_name="Matti",
            last_name="Meikäläinen",
            roles=[
                Role(
                    school="00001",
                    role="teacher",
                    group="7C",
                    municipality="Helsinki",
                )
            ],
            claims=[Claim(name="idpId", value=idp_id)],
        )


class ApiProfileRepository(ProfileRepository):
    @inject.autoparams("client")
    def __init__(self, client: AsyncClient, endpoint_url: str, token: str) -> None:
        self.client = client
        self.endpoint_url = endpoint_url
        self._token = token

    async def find(self, idp_id: str, hook_value: str) -> Profile:
        headers: dict[str, str] = {"Authorization": f"Token {self._token}"}

        try:
            response = await self.client.get(
                self.endpoint_url, params={idp_id: hook_value}, headers=headers
            )
        except RequestError as exc:
            raise ProfileHttpRequestException(
                500,
                {
                    "error": "Error occurred while making request to the profile API",
                    "error_description": str(exc),
                },
            ) from exc

        if response.status_code != 200:
            raise ProfileHttpResponseException(
                status_code=response.status_code,
                detail=f"No profile found for idp {idp_id}",
            )

        try:
            return Profile.model_validate(response.json())
        except ValueError as exc:
            raise ProfileHttpResponseException(
                status_code=response.status_code,
                detail=f"Could not parse the profile response: {exc}",
            ) from exc
