from logging import Logger
from typing import Dict, List, Union

import inject

from profile_enricher.utils import trim_or_none

AttributeMap = Dict[str, List[str]]


class AttributeAccumulator:
    """
    Merges single values into the resulting attribute map. Every attribute id
    gets the configured prefix, values are trimmed and stored only once per
    attribute, and blank values never create an attribute.
    """

    @inject.autoparams("logger")
    def __init__(self, prefix: str, logger: Logger) -> None:
        self.prefix = prefix or ""
        self.logger: Logger = logger

    def put(
        self,
        attributes: AttributeMap,
        attribute_id: Union[str, None],
        value: Union[str, None],
    ) -> None:
        trimmed_value = trim_or_none(value)

        if trim_or_none(attribute_id) is None or trimmed_value is None:
            self.logger.debug("Ignoring attribute %s, null value", attribute_id)
            return

        key = f"{self.prefix}{attribute_id}"
        values = attributes.get(key)

        if values is None:
            attributes[key] = [trimmed_value]
            self.logger.debug("Populated %s with value %s", key, trimmed_value)
        elif trimmed_value in values:
            self.logger.debug("Value %s already exists in attribute %s", trimmed_value, key)
        else:
            values.append(trimmed_value)
            self.logger.debug("Added value %s to attribute %s", trimmed_value, key)
