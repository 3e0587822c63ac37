from typing import List, Union

from profile_enricher.utils import trim_or_none

DEFAULT_SEPARATOR = ";"
ESCAPE_CHARACTER = "\\"


def split(value: Union[str, None], separator: str = DEFAULT_SEPARATOR) -> Union[List[str], None]:
    r"""
    Splits a multi-valued claim into its positional sub-values.

    Returns None when the value is missing or blank, so that callers can tell
    "no value" apart from "one empty value". Empty fields are kept in place,
    e.g. "a;;b" gives ["a", "", "b"].

    The escape character is stripped from every field after splitting, it does
    not protect the separator: "a\;b" gives ["a", "b"].
    """
    if trim_or_none(value) is None:
        return None

    assert value is not None
    return [
        field.replace(ESCAPE_CHARACTER, "").strip()
        for field in value.split(separator)
    ]
