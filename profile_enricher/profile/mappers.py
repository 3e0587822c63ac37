import hashlib
from logging import Logger
from typing import Dict, Mapping

import inject

from profile_enricher.attributes import constants
from profile_enricher.config.schemas import Config
from .schemas import Profile

USERNAME_PREFIX = "MPASSOID."

# logical field -> name of the claim carrying it in the profile
CLAIM_FIELDS: Dict[str, str] = {
    constants.ATTR_ID_LEARNER_ID: constants.ATTR_ID_LEARNER_ID,
    constants.ATTR_ID_LEGACY_ID: constants.ATTR_ID_LEGACY_ID,
    constants.ATTR_ID_ROLES: constants.CLAIM_SCHOOL_ROLES,
    constants.ATTR_ID_GROUPS: constants.CLAIM_SCHOOL_GROUPS,
    constants.ATTR_ID_GROUP_LEVELS: constants.CLAIM_GROUP_LEVEL,
    constants.ATTR_ID_SCHOOL_IDS: constants.CLAIM_SCHOOL_CODES,
    constants.ATTR_ID_LEARNING_MATERIALS_CHARGES: constants.CLAIM_LEARNING_MATERIALS_CHARGES,
}


def hash_username(idp_id: str, value: str) -> str:
    digest = hashlib.sha1(f"{idp_id}{value}".encode("utf-8")).hexdigest()  # nosec
    return f"{USERNAME_PREFIX}{digest}"


class SessionClaimsProfileMapper:
    """
    Builds a profile directly from the session claims of an identity provider
    that has direct attribute mappings configured. No network I/O is done.
    """

    @inject.autoparams()
    def __init__(self, config: Config, logger: Logger) -> None:
        self._principal_mappings = config.direct_idp.principal_mappings
        self._static_values = config.direct_idp.static_values
        self.logger: Logger = logger

    def has_mappings(self, idp_id: str) -> bool:
        return idp_id in self._principal_mappings

    def map(self, idp_id: str, session_claims: Mapping[str, str]) -> Profile:
        profile = Profile()

        if not self.has_mappings(idp_id):
            self.logger.debug("No direct attribute mappings for idp %s", idp_id)
            return profile

        static_values = self._static_values.get(idp_id, {})
        static_municipality = static_values.get(constants.ATTR_ID_MUNICIPALITIES)
        if static_municipality is not None:
            profile.add_claim(constants.ATTR_ID_MUNICIPALITIES, static_municipality)

        static_municipality_code = static_values.get(constants.ATTR_ID_MUNICIPALITY_CODE)
        if static_municipality_code is not None:
            profile.add_claim(constants.ATTR_ID_MUNICIPALITY_CODE, static_municipality_code)

        for field, claim_name in self._principal_mappings[idp_id].items():
            if claim_name not in session_claims:
                continue

            value = session_claims[claim_name]
            if field == constants.ATTR_ID_USERNAME:
                profile.username = hash_username(idp_id, value)
            elif field == constants.ATTR_ID_FIRSTNAME:
                profile.first_name = value
            elif field == constants.ATTR_ID_SURNAME:
                profile.last_name = value
            elif field == constants.ATTR_ID_NICKNAME:
                profile.nick_name = value
            elif field == constants.ATTR_ID_MUNICIPALITY_CODE:
                if static_municipality_code is None:
                    profile.add_claim(constants.ATTR_ID_MUNICIPALITY_CODE, value)
            elif field in CLAIM_FIELDS:
                profile.add_claim(CLAIM_FIELDS[field], value)
            else:
                self.logger.debug("Ignoring unknown direct attribute mapping %s", field)

        return profile
