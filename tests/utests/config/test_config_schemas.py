import pytest
from pydantic import ValidationError

from profile_enricher.config.schemas import (
    DEFAULT_ORGANIZATION_BASE_URL,
    AppConfig,
    Config,
    OrganizationConfig,
    RepositoryType,
    RoleConfig,
)


class TestAppConfig:
    def test_invalid_loglevel(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(name="enricher", loglevel="verbose")


class TestOrganizationConfig:
    def test_defaults(self) -> None:
        config = OrganizationConfig()

        assert config.organization_repository == RepositoryType.API
        assert config.base_url == DEFAULT_ORGANIZATION_BASE_URL
        assert config.caller_id is None
        assert config.office_types == []
        assert config.primary_language == "FI"

    def test_blank_values(self) -> None:
        config = OrganizationConfig(base_url=" ", caller_id="", office_types="")

        assert config.base_url == DEFAULT_ORGANIZATION_BASE_URL
        assert config.caller_id is None
        assert config.office_types == []

    def test_office_types_list(self) -> None:
        config = OrganizationConfig(office_types="toimipiste, oppisopimustoimipiste")

        assert config.office_types == ["toimipiste", "oppisopimustoimipiste"]


class TestRoleConfig:
    def test_role_mapping_without_code_is_dropped(self) -> None:
        config = RoleConfig(
            role_mappings={"Teacher": "Opettaja", "principal": "Rehtori"},
            role_code_mappings={"Opettaja": "2"},
        )

        assert config.role_mappings == {"teacher": "Opettaja"}

    def test_role_lists(self) -> None:
        config = RoleConfig(allowed_roles="Opettaja,Oppilas", student_roles="Oppilas")

        assert config.allowed_roles == ["Opettaja", "Oppilas"]
        assert config.student_roles == ["Oppilas"]


class TestConfig:
    def test_config_is_frozen(self, config: Config) -> None:
        with pytest.raises(ValidationError):
            config.app = AppConfig(name="other")  # type: ignore[misc]

    def test_profile_section_is_required(self) -> None:
        with pytest.raises(ValidationError):
            Config.model_validate({"app": {"name": "enricher"}})
