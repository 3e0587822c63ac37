import os
from typing import Union


def root_path(*args: str) -> str:
    """
    Returns the absolute path to a file or directory relative to the project root.

    Args:
        *args (str): Any number of path components as strings. These will be joined
                     together to form the final path relative to the project root.

    Returns:
        str: Absolute path to the specified file or directory relative to the project root.
    """
    return os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", *args),
    )


def trim_or_none(value: Union[str, None]) -> Union[str, None]:
    if value is None:
        return None

    trimmed = value.strip()
    return trimmed if trimmed else None


def is_numeric(value: Union[str, None]) -> bool:
    return value is not None and value.isdecimal()
