"""Branch name synthesis."""

import re
import uuid

NAME_PREFIX = "@"
NAME_SEPARATOR = "/"
TOKEN_LENGTH = 8


def synthesize(category_code: str) -> str:
    """Build a new branch name like ``@feat/1a2b3c4d``.

    The suffix is the first eight characters of a random UUID, so two calls
    with the same code give different names with overwhelming probability.
    Nothing checks the result against existing branches.
    """
    token = str(uuid.uuid4())[:TOKEN_LENGTH]
    return f"{NAME_PREFIX}{category_code}{NAME_SEPARATOR}{token}"


def branch_name_pattern(category_code: str) -> re.Pattern[str]:
    """Regex matching names produced by synthesize() for the given code."""
    return re.compile(rf"{re.escape(NAME_PREFIX + category_code + NAME_SEPARATOR)}[0-9a-f]{{{TOKEN_LENGTH}}}")
