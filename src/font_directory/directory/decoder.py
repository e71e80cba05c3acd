"""Decoding of directory payloads into family records."""

import logging

from google.protobuf.message import DecodeError as ProtobufDecodeError

from ..core.exceptions import DecodeError
from ..core.models import FamilyRecord, FontVariant
from .schema import Directory

logger = logging.getLogger(__name__)


def _optional(message, field_name: str):
    """Return a singular field's value, or None when it is absent."""
    return getattr(message, field_name) if message.HasField(field_name) else None


def _decode_font(font) -> FontVariant:
    weight = _optional(font, "weight")
    italic = _optional(font, "italic")
    file_spec = _optional(font, "file")

    return FontVariant(
        weight_start=_optional(weight, "start") if weight is not None else None,
        italic_start=_optional(italic, "start") if italic is not None else None,
        file_hash=_optional(file_spec, "hash") if file_spec is not None else None,
    )


def _decode_family(family) -> FamilyRecord:
    # Repeated fields have no presence; an empty list is still a list
    return FamilyRecord(
        name=_optional(family, "name"),
        fonts=[_decode_font(font) for font in family.fonts],
    )


def decode(data: bytes) -> list[FamilyRecord]:
    """
    Decode a directory payload into family records.

    Args:
        data: Raw bytes of a ``directoryNNN.pb`` file

    Returns:
        Family records in payload order

    Raises:
        DecodeError: If the bytes are not a valid directory message
    """
    directory = Directory()
    try:
        directory.ParseFromString(bytes(data))
    except ProtobufDecodeError as e:
        raise DecodeError(f"Payload is not a valid font directory: {e}") from e

    families = [_decode_family(family) for family in directory.family]
    logger.debug(f"Decoded {len(families)} font families")
    return families
