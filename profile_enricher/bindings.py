import configparser
import logging

from httpx import AsyncClient, Limits
from inject import Binder

from .config.schemas import Config
from .config.services import ConfigParser
from .organization.factories import OrganizationRepositoryFactory
from .organization.repositories import OrganizationRepository
from .profile.factories import ProfileRepositoryFactory
from .profile.repositories import ProfileRepository
from .roles.mapper import RoleMapper
from .utils import root_path


def configure_bindings(binder: Binder, config_file: str) -> None:
    """
    Configure dependency bindings for the enricher.
    """
    config: Config = __parse_app_config(config_file=config_file)
    binder.bind(Config, config)

    setup_logging(binder=binder, config=config)

    __bind_http_client(binder, config)
    __bind_profile_repository(binder, config)
    __bind_organization_repository(binder, config)
    __bind_role_mapper(binder, config)


def setup_logging(binder: Binder, config: Config) -> None:
    logging.basicConfig(level=config.app.loglevel.upper())
    logger: logging.Logger = logging.getLogger(name=config.app.name)
    binder.bind(logging.Logger, logger)


def __parse_app_config(config_file: str) -> Config:
    config_parser = ConfigParser(
        config_parser=configparser.ConfigParser(
            interpolation=configparser.ExtendedInterpolation(),
        ),
        config_path=root_path(config_file),
    )
    return config_parser.parse()


def __bind_http_client(binder: Binder, config: Config) -> None:
    # every resolve call runs in its own event loop, connections must not be pooled across them
    binder.bind_to_constructor(
        AsyncClient,
        lambda: AsyncClient(
            verify=not config.profile.disregard_tls_certificate,
            limits=Limits(max_keepalive_connections=0),
        ),
    )


def __bind_profile_repository(binder: Binder, config: Config) -> None:
    binder.bind_to_constructor(
        ProfileRepository, ProfileRepositoryFactory(config.profile).create
    )


def __bind_organization_repository(binder: Binder, config: Config) -> None:
    binder.bind_to_constructor(
        OrganizationRepository,
        OrganizationRepositoryFactory(config.organization).create,
    )


def __bind_role_mapper(binder: Binder, config: Config) -> None:
    binder.bind(
        RoleMapper,
        RoleMapper(
            role_mappings=config.roles.role_mappings,
            role_code_mappings=config.roles.role_code_mappings,
            allowed_roles=config.roles.allowed_roles,
            student_roles=config.roles.student_roles,
            office_types=config.organization.office_types,
        ),
    )
