import logging
from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)


class Role(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    school: Union[str, None] = None
    role: Union[str, None] = None
    group: Union[str, None] = None
    group_level: Union[int, None] = Field(default=None, alias="groupLevel")
    municipality: Union[str, None] = None
    learning_materials_charge: Union[int, None] = Field(
        default=None, alias="learningMaterialsCharge"
    )

    @field_validator("group_level", "learning_materials_charge", mode="before")
    @classmethod
    def drop_non_integer(cls, value: Any) -> Any:
        if value is None or isinstance(value, int):
            return value

        try:
            return int(str(value).strip())
        except ValueError:
            log.warning("Ignoring role field that is not an integer: %s", value)
            return None


class Claim(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    value: Union[str, None] = None


class Profile(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    username: Union[str, None] = None
    first_name: Union[str, None] = None
    last_name: Union[str, None] = None
    nick_name: Union[str, None] = None
    roles: Union[List[Role], None] = None
    claims: Union[List[Claim], None] = Field(default=None, alias="attributes")

    def get_claim(self, name: str) -> Union[Claim, None]:
        for claim in self.claims or []:
            if claim.name == name:
                return claim

        return None

    def get_claim_value(self, name: str) -> Union[str, None]:
        claim = self.get_claim(name)
        return claim.value if claim is not None else None

    def add_claim(self, name: str, value: Union[str, None]) -> None:
        self.claims = [*(self.claims or []), Claim(name=name, value=value)]
