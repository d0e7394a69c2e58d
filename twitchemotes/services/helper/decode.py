import logging
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from twitchemotes.errors import DecodeFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


def decode(schema: TypeAdapter[T], text: str | bytes) -> T:
    """Validate a JSON document against ``schema``.

    Malformed JSON and schema mismatches both raise :class:`DecodeFailure`
    wrapping the original ``ValidationError``. Nothing is partially built.
    """
    try:
        return schema.validate_json(text, strict=True)
    except ValidationError as e:
        logger.warning(
            f"Failed to decode {e.title} payload - {e.error_count()} error(s): {e.errors(include_url=False)[:3]}"
        )
        raise DecodeFailure(e) from e
