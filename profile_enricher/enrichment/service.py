from logging import Logger
from typing import List, Mapping, Sequence, Union

import inject

from profile_enricher.attributes import constants
from profile_enricher.attributes.accumulator import AttributeAccumulator, AttributeMap
from profile_enricher.config.schemas import Config
from profile_enricher.exceptions import MissingInputException
from profile_enricher.organization.schemas import Organization
from profile_enricher.organization.service import OrganizationResolver
from profile_enricher.profile.schemas import Profile, Role
from profile_enricher.profile.service import ProfileService
from profile_enricher.roles.composer import StructuredRoleComposer
from profile_enricher.roles.mapper import RoleMapper
from profile_enricher.roles.synthesizer import ACCEPTED_LEARNING_MATERIALS_CHARGES, RoleSynthesizer
from profile_enricher.utils import is_numeric, trim_or_none


class EnrichmentService:
    @inject.autoparams()
    def __init__(
        self,
        config: Config,
        profile_service: ProfileService,
        organization_resolver: OrganizationResolver,
        role_mapper: RoleMapper,
        role_synthesizer: RoleSynthesizer,
        structured_role_composer: StructuredRoleComposer,
        logger: Logger,
    ) -> None:
        self._idp_id_attribute: str = config.profile.idp_id_attribute
        self._hook_attribute: str = config.profile.hook_attribute
        self._profile_service = profile_service
        self._organization_resolver = organization_resolver
        self._role_mapper = role_mapper
        self._role_synthesizer = role_synthesizer
        self._composer = structured_role_composer
        self._accumulator = AttributeAccumulator(
            prefix=config.profile.result_attribute_prefix, logger=logger
        )
        self.logger: Logger = logger

    async def resolve(
        self,
        identity_attributes: Mapping[str, Sequence[str]],
        session_claims: Mapping[str, str],
    ) -> AttributeMap:
        """
        Resolves the enriched attributes for one authentication event.

        `identity_attributes` holds the attributes already resolved by the host,
        from which the identity provider id and the hook value are read.
        `session_claims` holds the claims of the authenticated session, used
        for identity providers with direct attribute mappings.

        Raises MissingInputException when the identity provider id, or the hook
        value needed for the profile API, is not a single value.
        """
        attributes: AttributeMap = {}

        idp_id = self._collect_single_value(identity_attributes, self._idp_id_attribute)
        if trim_or_none(idp_id) is None:
            self.logger.error("Could not resolve idpId value")
            raise MissingInputException(self._idp_id_attribute)
        assert idp_id is not None

        profile: Union[Profile, None]
        if self._profile_service.uses_session_claims(idp_id):
            profile = self._profile_service.get_profile_from_session_claims(
                idp_id, session_claims
            )
        else:
            hook_value = self._collect_single_value(identity_attributes, self._hook_attribute)
            if hook_value is None:
                self.logger.error("Could not resolve hookAttribute value")
                raise MissingInputException(self._hook_attribute)
            profile = await self._profile_service.get_profile(idp_id, hook_value)

        if profile is None:
            return attributes

        if profile.claims and not profile.roles:
            profile.roles = self._synthesize_roles(profile)

        await self._populate_attributes(attributes, profile)
        return attributes

    def _collect_single_value(
        self, identity_attributes: Mapping[str, Sequence[str]], attribute_id: str
    ) -> Union[str, None]:
        values = identity_attributes.get(attribute_id)
        if values is None:
            self.logger.warning("Could not find an attribute %s from the context", attribute_id)
            return None

        if len(values) == 0:
            self.logger.warning("No value found for the attribute %s", attribute_id)
            return None

        if len(values) > 1:
            self.logger.warning("Multiple values found for the attribute %s, all ignored", attribute_id)
            return None

        return values[0]

    def _synthesize_roles(self, profile: Profile) -> Union[List[Role], None]:
        school_ids = profile.get_claim_value(constants.CLAIM_SCHOOL_CODES)
        school_roles = profile.get_claim_value(constants.CLAIM_SCHOOL_ROLES)

        if school_ids is None or school_roles is None:
            self.logger.debug("Could not synthesize roles, didn't find any schools or roles")
            return None

        roles = self._role_synthesizer.synthesize(
            school_ids=school_ids,
            groups=profile.get_claim_value(constants.CLAIM_SCHOOL_GROUPS),
            school_roles=school_roles,
            charges=profile.get_claim_value(constants.CLAIM_LEARNING_MATERIALS_CHARGES),
            group_level=profile.get_claim_value(constants.CLAIM_GROUP_LEVEL),
            municipality=profile.get_claim_value(constants.CLAIM_MUNICIPALITIES),
        )
        if roles is None:
            self.logger.debug("Could not synthesize roles from the profile claims")

        return roles

    async def _populate_attributes(self, attributes: AttributeMap, profile: Profile) -> None:
        put = self._accumulator.put

        put(attributes, constants.ATTR_ID_USERNAME, profile.username)
        put(attributes, constants.ATTR_ID_FIRSTNAME, profile.first_name)
        put(attributes, constants.ATTR_ID_SURNAME, profile.last_name)
        put(attributes, constants.ATTR_ID_NICKNAME, profile.nick_name)

        roles = profile.roles or []
        self.logger.debug("Roles found: %d", len(roles))
        for index, role in enumerate(roles):
            await self._populate_role(attributes, index, role)

        for claim in profile.claims or []:
            put(attributes, f"{constants.ATTR_PREFIX}{claim.name}", claim.value)

    async def _populate_role(self, attributes: AttributeMap, index: int, role: Role) -> None:
        put = self._accumulator.put

        label, _ = self._role_mapper.canonicalize(role.role)
        if not self._role_mapper.is_allowed(label):
            self.logger.info("Ignoring role %s, it is not an allowed school role", role.role)
            return

        organization = await self._resolve_school(role.school)
        if organization is None:
            self._populate_unresolved_school(attributes, role)
        else:
            self._populate_school(attributes, organization, role)

        put(attributes, constants.ATTR_ID_ROLES, role.role)
        put(attributes, constants.ATTR_ID_MUNICIPALITIES, role.municipality)

        # If multiple groups or group levels are provided only the first ones are populated
        if index == 0:
            put(attributes, constants.ATTR_ID_GROUPS, role.group)
            if role.group_level is not None:
                put(attributes, constants.ATTR_ID_GROUP_LEVELS, str(role.group_level))

    async def _resolve_school(self, raw_school: Union[str, None]) -> Union[Organization, None]:
        organization = await self._organization_resolver.resolve(raw_school)
        if organization is None or not self._role_mapper.is_office_type(
            organization.organization_type
        ):
            return organization

        self.logger.debug(
            "Organization %s is an office, resolving its school %s",
            organization.oid,
            organization.parent_oid,
        )
        school = await self._organization_resolver.resolve(organization.parent_oid)
        if school is None:
            self.logger.warning("Could not resolve the school of office %s", organization.oid)
            return None

        school.office_oid = organization.oid
        school.office_name = organization.name
        return school

    def _populate_unresolved_school(self, attributes: AttributeMap, role: Role) -> None:
        raw_school = role.school
        self.logger.debug("Didn't find any schools for %s", raw_school)

        if is_numeric(trim_or_none(raw_school)):
            self._accumulator.put(attributes, constants.ATTR_ID_SCHOOL_IDS, raw_school)
            self._put_structured_roles(attributes, "", raw_school, role)
        else:
            self._accumulator.put(attributes, constants.ATTR_ID_SCHOOLS, raw_school)
            self._put_structured_roles(attributes, raw_school, "", role)

    def _populate_school(
        self, attributes: AttributeMap, organization: Organization, role: Role
    ) -> None:
        put = self._accumulator.put
        school_id = organization.id or organization.oid

        put(attributes, constants.ATTR_ID_SCHOOL_IDS, organization.id)
        put(attributes, constants.ATTR_ID_SCHOOL_OIDS, organization.oid)
        put(attributes, constants.ATTR_ID_SCHOOLS, organization.name)
        put(attributes, constants.ATTR_ID_SCHOOL_INFOS, f"{school_id};{organization.name or ''}")
        put(attributes, constants.ATTR_ID_EDUCATION_PROVIDER_OIDS, organization.parent_oid)
        put(attributes, constants.ATTR_ID_EDUCATION_PROVIDER_NAMES, organization.parent_name)
        if organization.parent_oid is not None:
            put(
                attributes,
                constants.ATTR_ID_EDUCATION_PROVIDER_INFOS,
                f"{organization.parent_oid};{organization.parent_name or ''}",
            )
        put(attributes, constants.ATTR_ID_OFFICE_OIDS, organization.office_oid)
        put(attributes, constants.ATTR_ID_OFFICE_NAMES, organization.office_name)

        self._put_structured_roles(attributes, organization.name, school_id, role)
        put(
            attributes,
            constants.ATTR_ID_STRUCTURED_ROLES_WITH_PARENT_OID,
            self._composer.compose_with_parent_oid(organization, role),
        )

        if self._accepts_learning_materials_charge(role):
            put(
                attributes,
                constants.ATTR_ID_LEARNING_MATERIALS_CHARGES,
                f"{role.learning_materials_charge};{school_id}",
            )

    def _accepts_learning_materials_charge(self, role: Role) -> bool:
        if role.learning_materials_charge is None:
            return False

        if role.learning_materials_charge not in ACCEPTED_LEARNING_MATERIALS_CHARGES:
            self.logger.warning(
                "Ignoring learning materials charge %s", role.learning_materials_charge
            )
            return False

        return self._role_mapper.is_student_role(self._role_mapper.label(role.role))

    def _put_structured_roles(
        self,
        attributes: AttributeMap,
        school_name: Union[str, None],
        school_id: Union[str, None],
        role: Role,
    ) -> None:
        structured_role, structured_role_wid = self._composer.compose(school_name, school_id, role)
        self._accumulator.put(attributes, constants.ATTR_ID_STRUCTURED_ROLES, structured_role)
        self._accumulator.put(attributes, constants.ATTR_ID_STRUCTURED_ROLES_WID, structured_role_wid)
