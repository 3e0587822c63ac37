from logging import Logger
from typing import Tuple, Union

import inject

from profile_enricher.organization.schemas import Organization
from profile_enricher.profile.schemas import Role
from .mapper import RoleMapper

SEPARATOR = ";"
STRUCTURED_ROLE_FIELDS = 4
STRUCTURED_ROLE_WITH_PARENT_OID_FIELDS = 7


def _join(*fields: Union[str, None]) -> str:
    return SEPARATOR.join(field if field is not None else "" for field in fields)


def _field_count(value: str) -> int:
    return len(value.split(SEPARATOR))


class StructuredRoleComposer:
    """
    Encodes a role with its organizational context into single delimited
    strings, for relying parties that cannot consume multi-field attributes.
    """

    @inject.autoparams()
    def __init__(self, role_mapper: RoleMapper, logger: Logger) -> None:
        self._role_mapper = role_mapper
        self.logger: Logger = logger

    def compose(
        self,
        school_name: Union[str, None],
        school_id: Union[str, None],
        role: Role,
    ) -> Tuple[str, Union[str, None]]:
        """
        Returns the structured role "municipality;schoolName;group;role" and the
        structured role with id "municipality;schoolId;group;role". The latter
        is None when it would have more than four fields.
        """
        label, _ = self._role_mapper.canonicalize(role.role)

        structured_role = _join(role.municipality, school_name, role.group, label)
        self.logger.debug("Composed structured role: %s", structured_role)

        structured_role_wid = _join(role.municipality, school_id, role.group, label)
        if _field_count(structured_role_wid) > STRUCTURED_ROLE_FIELDS:
            self.logger.warning(
                "Ignoring structured role with id, too many fields: %s", structured_role_wid
            )
            return structured_role, None

        self.logger.debug("Composed structured role with id: %s", structured_role_wid)
        return structured_role, structured_role_wid

    def compose_with_parent_oid(
        self, organization: Organization, role: Role
    ) -> Union[str, None]:
        school_id = organization.id or organization.oid
        if school_id is None or organization.parent_oid is None:
            self.logger.debug("Could not compose role with education provider oid")
            return None

        label, code = self._role_mapper.canonicalize(role.role)
        structured_role = _join(
            organization.parent_oid,
            school_id,
            role.group,
            label,
            code,
            organization.oid,
            organization.office_oid,
        )

        if _field_count(structured_role) != STRUCTURED_ROLE_WITH_PARENT_OID_FIELDS:
            self.logger.warning(
                "Ignoring structured role with parent oid, wrong number of fields: %s",
                structured_role,
            )
            return None

        self.logger.debug("Composed structured role with parent oid: %s", structured_role)
        return structured_role
