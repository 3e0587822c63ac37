from typing import Dict, FrozenSet, Iterable, Tuple, Union

UNKNOWN_ROLE_CODE = "-1"


class RoleMapper:
    def __init__(
        self,
        role_mappings: Dict[str, str],
        role_code_mappings: Dict[str, str],
        allowed_roles: Iterable[str] = (),
        student_roles: Iterable[str] = (),
        office_types: Iterable[str] = (),
    ) -> None:
        self._role_mappings = {key.lower(): value for key, value in role_mappings.items()}
        self._role_code_mappings = dict(role_code_mappings)
        self._allowed_roles: FrozenSet[str] = frozenset(allowed_roles)
        self._student_roles: FrozenSet[str] = frozenset(student_roles)
        self._office_types: FrozenSet[str] = frozenset(office_types)

    def canonicalize(self, raw_role: Union[str, None]) -> Tuple[str, str]:
        """
        Maps a raw role to its canonical label and code, e.g. "teacher" to
        ("Opettaja", "5"). A missing role maps to ("", "").
        """
        if not raw_role:
            return "", ""

        label = self._role_mappings.get(raw_role.lower(), raw_role)
        label = label[:1].upper() + label[1:]
        code = self._role_code_mappings.get(label, UNKNOWN_ROLE_CODE)
        return label, code

    def label(self, raw_role: Union[str, None]) -> str:
        return self.canonicalize(raw_role)[0]

    def is_allowed(self, label: str) -> bool:
        return not self._allowed_roles or label in self._allowed_roles

    def is_student_role(self, label: str) -> bool:
        return label in self._student_roles

    def is_office_type(self, organization_type: Union[str, None]) -> bool:
        return organization_type is not None and organization_type in self._office_types
