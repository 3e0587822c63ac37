import configparser
from logging import Logger
from typing import Callable, Iterator, Union

import inject
import pytest
from inject import Binder
from pytest_mock import MockerFixture

from profile_enricher.bindings import configure_bindings as configure_app_bindings
from profile_enricher.config.schemas import Config
from profile_enricher.config.services import ConfigParser
from profile_enricher.roles.mapper import RoleMapper
from profile_enricher.utils import root_path

TEST_CONFIG_FILE = "enricher.conf.test"


@pytest.fixture
def logger(mocker: MockerFixture) -> Logger:
    return mocker.Mock(Logger)


@pytest.fixture
def config() -> Config:
    config_parser = ConfigParser(
        config_parser=configparser.ConfigParser(
            interpolation=configparser.ExtendedInterpolation(),
        ),
        config_path=root_path(TEST_CONFIG_FILE),
    )
    return config_parser.parse()


@pytest.fixture
def role_mapper() -> RoleMapper:
    return RoleMapper(
        role_mappings={"teacher": "Opettaja", "student": "Oppilas"},
        role_code_mappings={"Opettaja": "5", "Oppilas": "1"},
        student_roles=["Oppilas"],
        office_types=["toimipiste"],
    )


@pytest.fixture
def configure_bindings() -> Iterator[Callable[..., None]]:
    """
    Configures the inject bindings from `enricher.conf.test`. Bindings passed
    in `bindings_override` are applied over the standard ones.
    """

    def configure(bindings_override: Union[Callable[[Binder], None], None] = None) -> None:
        def bindings_config(binder: Binder) -> None:
            binder.install(
                lambda binder: configure_app_bindings(binder, config_file=TEST_CONFIG_FILE)
            )

            if bindings_override:
                bindings_override(binder)

        inject.configure(bindings_config, clear=True, allow_override=True)

    yield configure
    inject.clear()
