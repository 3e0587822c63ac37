import logging
from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from profile_enricher.logging.schemas import LogLevel

log = logging.getLogger(__name__)

DEFAULT_ORGANIZATION_BASE_URL = (
    "https://virkailija.opintopolku.fi/koodisto-service/rest/codeelement/oppilaitosnumero_"
)


def _as_list(value: Any) -> Any:
    if value is None:
        return []

    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]

    return value


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field()
    loglevel: LogLevel = Field(default=LogLevel.INFO)


class RepositoryType(Enum):
    MOCK = "mock"
    API = "api"


class ProfileConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile_repository: RepositoryType = Field(default=RepositoryType.API)
    endpoint_url: Union[str, None] = None
    token: Union[str, None] = None
    idp_id_attribute: str
    hook_attribute: str
    result_attribute_prefix: str = Field(default="")
    disregard_tls_certificate: bool = Field(default=False)

    @model_validator(mode="after")
    def validate_endpoint_required(self) -> "ProfileConfig":
        if self.profile_repository is RepositoryType.API:
            if not self.endpoint_url:
                raise ValueError("endpoint_url is required when profile_repository is 'api'")
            if not self.token:
                raise ValueError("token is required when profile_repository is 'api'")

        return self


class OrganizationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    organization_repository: RepositoryType = Field(default=RepositoryType.API)
    base_url: str = Field(default=DEFAULT_ORGANIZATION_BASE_URL)
    caller_id: Union[str, None] = None
    office_types: List[str] = Field(default_factory=list)
    primary_language: str = Field(default="FI")

    @field_validator("office_types", mode="before")
    @classmethod
    def split_office_types(cls, value: Any) -> Any:
        return _as_list(value)

    @field_validator("base_url", mode="before")
    @classmethod
    def default_blank_base_url(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_ORGANIZATION_BASE_URL

        return value

    @field_validator("caller_id", mode="before")
    @classmethod
    def blank_caller_id_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None

        return value


class RoleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    allowed_roles: List[str] = Field(default_factory=list)
    student_roles: List[str] = Field(default_factory=list)
    role_mappings: Dict[str, str] = Field(default_factory=dict)
    role_code_mappings: Dict[str, str] = Field(default_factory=dict)

    @field_validator("allowed_roles", "student_roles", mode="before")
    @classmethod
    def split_role_lists(cls, value: Any) -> Any:
        return _as_list(value)

    @model_validator(mode="before")
    @classmethod
    def drop_role_mappings_without_code(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        role_mappings: Dict[str, str] = data.get("role_mappings") or {}
        role_code_mappings: Dict[str, str] = data.get("role_code_mappings") or {}

        accepted: Dict[str, str] = {}
        for input_role, output_role in role_mappings.items():
            if output_role in role_code_mappings:
                accepted[input_role.lower()] = output_role
            else:
                log.error("Missing school role code for %s", output_role)

        return {**data, "role_mappings": accepted}


class DirectIdpConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    principal_mappings: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    static_values: Dict[str, Dict[str, str]] = Field(default_factory=dict)


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    app: AppConfig
    profile: ProfileConfig
    organization: OrganizationConfig = Field(default_factory=OrganizationConfig)
    roles: RoleConfig = Field(default_factory=RoleConfig)
    direct_idp: DirectIdpConfig = Field(default_factory=DirectIdpConfig)
