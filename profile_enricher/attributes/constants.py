ATTR_ID_USERNAME = "username"
ATTR_ID_FIRSTNAME = "firstName"
ATTR_ID_SURNAME = "surname"
ATTR_ID_NICKNAME = "nickName"

ATTR_ID_ROLES = "roles"
ATTR_ID_MUNICIPALITIES = "municipalities"
ATTR_ID_GROUPS = "groups"
# Only populated from the first role
ATTR_ID_GROUP_LEVELS = "groupLevels"

ATTR_ID_SCHOOLS = "schools"
ATTR_ID_SCHOOL_IDS = "schoolIds"
ATTR_ID_SCHOOL_OIDS = "schoolOids"
ATTR_ID_SCHOOL_INFOS = "schoolInfos"

ATTR_ID_EDUCATION_PROVIDER_OIDS = "educationProviderOids"
ATTR_ID_EDUCATION_PROVIDER_NAMES = "educationProviderNames"
ATTR_ID_EDUCATION_PROVIDER_INFOS = "educationProviderInfos"

ATTR_ID_OFFICE_OIDS = "officeOids"
ATTR_ID_OFFICE_NAMES = "officeNames"

ATTR_ID_STRUCTURED_ROLES = "structuredRoles"
ATTR_ID_STRUCTURED_ROLES_WID = "structuredRolesWid"
ATTR_ID_STRUCTURED_ROLES_WITH_PARENT_OID = "structuredRolesWithParentOid"

ATTR_ID_LEARNING_MATERIALS_CHARGES = "learningMaterialsCharges"

# Only used with direct idp attributes
ATTR_ID_LEARNER_ID = "learnerId"
ATTR_ID_LEGACY_ID = "legacyId"
ATTR_ID_MUNICIPALITY_CODE = "municipalityCode"

# Prefix for attribute ids of the profile claims
ATTR_PREFIX = "attr_"

# Claims used for synthesizing roles
CLAIM_SCHOOL_CODES = "schoolCodes"
CLAIM_SCHOOL_GROUPS = "schoolGroups"
CLAIM_SCHOOL_ROLES = "schoolRoles"
CLAIM_GROUP_LEVEL = "groupLevel"
CLAIM_MUNICIPALITIES = ATTR_ID_MUNICIPALITIES
CLAIM_LEARNING_MATERIALS_CHARGES = ATTR_ID_LEARNING_MATERIALS_CHARGES
