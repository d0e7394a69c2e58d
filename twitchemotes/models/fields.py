from typing import Annotated, Optional

from pydantic import AfterValidator


def empty_string_to_none(value: Optional[str]) -> Optional[str]:
    """Treat ``""`` as absent, pass every other value through untouched."""
    if value == "":
        return None
    return value


OptionalNonEmptyStr = Annotated[Optional[str], AfterValidator(empty_string_to_none)]
