from logging import Logger
from typing import List, Union

import inject

from profile_enricher.parsing.multi_value import split
from profile_enricher.profile.schemas import Role
from profile_enricher.utils import trim_or_none
from .mapper import RoleMapper

ACCEPTED_LEARNING_MATERIALS_CHARGES = (0, 1)


class RoleSynthesizer:
    """
    Reconstructs role records from the parallel multi-valued claims that
    identity providers without structured roles send, e.g.

        schoolCodes  = "12345;23456"
        schoolRoles  = "Oppilas"
        schoolGroups = "7C"

    Schools are the pivot: one role is built per school id, and groups, roles
    and learning materials charges are matched to them positionally.
    """

    @inject.autoparams()
    def __init__(self, role_mapper: RoleMapper, logger: Logger) -> None:
        self._role_mapper = role_mapper
        self.logger: Logger = logger

    def synthesize(
        self,
        school_ids: Union[str, None],
        groups: Union[str, None],
        school_roles: Union[str, None],
        charges: Union[str, None] = None,
        group_level: Union[str, None] = None,
        municipality: Union[str, None] = None,
    ) -> Union[List[Role], None]:
        school_id_values = split(school_ids)
        school_role_values = split(school_roles)
        if school_id_values is None or school_role_values is None:
            self.logger.debug("Could not synthesize roles, no school ids or school roles")
            return None

        group_values = split(groups) or []
        charge_values = split(charges) or []

        if not self._matches_rules(school_id_values, group_values, school_role_values):
            self.logger.warning(
                "None of the rules matched %d school ids, %d groups and %d school roles",
                len(school_id_values),
                len(group_values),
                len(school_role_values),
            )
            return None

        shared_municipality = trim_or_none(municipality)

        roles: List[Role] = []
        for index, school_id in enumerate(school_id_values):
            role = Role(school=school_id, municipality=shared_municipality)

            if len(school_role_values) == 1:
                role.role = trim_or_none(school_role_values[0])
            else:
                role.role = trim_or_none(school_role_values[index])

            if index == 0 and len(group_values) == 1:
                role.group = trim_or_none(group_values[0])
            elif len(group_values) > 1:
                role.group = trim_or_none(group_values[index])

            # Group level is populated only to the first role
            if index == 0:
                role.group_level = self._parse_group_level(group_level)

            role.learning_materials_charge = self._resolve_charge(
                role, index, len(school_id_values), charge_values
            )

            self.logger.debug("Synthesized role %s", role)
            roles.append(role)

        return roles

    def _matches_rules(
        self,
        school_ids: List[str],
        groups: List[str],
        school_roles: List[str],
    ) -> bool:
        if len(groups) == len(school_ids) == len(school_roles):
            self.logger.debug(
                "Found matching rule: as many school roles and groups as school ids"
            )
            return True

        if len(groups) <= 1 and (
            len(school_roles) == len(school_ids) or len(school_roles) == 1
        ):
            self.logger.debug(
                "Found matching rule: at most one group and one or as many school roles as school ids"
            )
            return True

        if len(groups) == len(school_ids) and len(school_roles) == 1:
            self.logger.debug(
                "Found matching rule: one school role and as many groups as school ids"
            )
            return True

        return False

    def _parse_group_level(self, group_level: Union[str, None]) -> Union[int, None]:
        trimmed = trim_or_none(group_level)
        if trimmed is None:
            return None

        try:
            return int(trimmed)
        except ValueError:
            self.logger.warning("Could not parse given group level %s to an integer", trimmed)
            return None

    def _resolve_charge(
        self,
        role: Role,
        index: int,
        school_count: int,
        charge_values: List[str],
    ) -> Union[int, None]:
        if not charge_values:
            return None

        if not self._role_mapper.is_student_role(self._role_mapper.label(role.role)):
            return None

        if len(charge_values) == 1:
            raw_charge = charge_values[0]
        elif len(charge_values) == school_count:
            raw_charge = charge_values[index]
        else:
            self.logger.warning(
                "Could not match %d learning materials charges to %d school ids",
                len(charge_values),
                school_count,
            )
            return None

        try:
            charge = int(raw_charge)
        except ValueError:
            self.logger.debug("Ignoring learning materials charge %s", raw_charge)
            return None

        return charge if charge in ACCEPTED_LEARNING_MATERIALS_CHARGES else None
