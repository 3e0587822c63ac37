import configparser
import os
from typing import Any, Dict

from .schemas import Config


class ConfigParser:
    DEFAULT_SECTION = "default"
    SECTION_PATH_SEPARATOR = "."
    # [direct_idp.principal_mappings.idp.example.org] keeps the dots of the idp id
    MAX_SECTION_DEPTH = 3

    def __init__(
        self,
        config_parser: configparser.ConfigParser,
        config_path: str,
    ) -> None:
        self.config_parser = config_parser
        # role labels and claim names are case sensitive
        self.config_parser.optionxform = str  # type: ignore[assignment,method-assign]
        self.config_path = config_path

    def parse(self) -> Config:
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(
                f"Configuration file '{self.config_path}' not found."
            )

        self.config_parser.read(self.config_path, encoding="utf-8")

        conf_values: Dict[str, Any] = {}

        for section in self.config_parser.sections():
            section_values = dict(self.config_parser[section])
            if section == self.DEFAULT_SECTION:
                conf_values.update(section_values)
                continue

            path = section.split(
                self.SECTION_PATH_SEPARATOR, self.MAX_SECTION_DEPTH - 1
            )
            target = conf_values
            for key in path[:-1]:
                target = target.setdefault(key, {})
            target.setdefault(path[-1], {}).update(section_values)

        return Config(**conf_values)
