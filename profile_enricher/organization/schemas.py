from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class OrganizationMetadataDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Union[str, None] = Field(default=None, alias="nimi")
    short_name: Union[str, None] = Field(default=None, alias="lyhytNimi")
    language: Union[str, None] = Field(default=None, alias="kieli")


class OrganizationDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    code_uri: Union[str, None] = Field(default=None, alias="koodiUri")
    metadata: Union[List[OrganizationMetadataDTO], None] = None
    version: Union[str, None] = Field(default=None, alias="versio")
    code_value: Union[str, None] = Field(default=None, alias="koodiArvo")
    oid: Union[str, None] = None
    parent_oid: Union[str, None] = Field(default=None, alias="parentOid")
    parent_name: Union[str, None] = Field(default=None, alias="parentName")
    organization_type: Union[str, None] = Field(default=None, alias="organizationType")

    def primary_name(self, language: str) -> Union[str, None]:
        if not self.metadata:
            return None

        for metadata in self.metadata:
            if metadata.language == language:
                return metadata.name

        return self.metadata[0].name


class Organization(BaseModel):
    id: Union[str, None] = None
    oid: Union[str, None] = None
    name: Union[str, None] = None
    parent_oid: Union[str, None] = None
    parent_name: Union[str, None] = None
    office_oid: Union[str, None] = None
    office_name: Union[str, None] = None
    organization_type: Union[str, None] = None

    @staticmethod
    def from_organization_dto(
        organization_dto: OrganizationDTO, language: str
    ) -> "Organization":
        return Organization(
            id=organization_dto.code_value,
            oid=organization_dto.oid,
            name=organization_dto.primary_name(language),
            parent_oid=organization_dto.parent_oid,
            parent_name=organization_dto.parent_name,
            organization_type=organization_dto.organization_type,
        )
