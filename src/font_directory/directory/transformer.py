"""
Data Transformer
================

Builds the family lookup table from decoded directory records. The transform
is all-or-nothing: every record is validated before the table is built, so a
single malformed record fails the whole run and no partial table exists.
"""

import logging
import math
from collections.abc import Iterable

from ..core.exceptions import MissingHashError, MissingNameOrFontsError, MissingWeightError
from ..core.models import (
    FamilyRecord,
    FontStyle,
    FontStyles,
    FontVariant,
    OutputTable,
    ValidatedFamily,
    ValidatedVariant,
)
from .hashing import to_hex

logger = logging.getLogger(__name__)


def validate_variant(family: str, index: int, font: FontVariant) -> ValidatedVariant:
    if font.weight_start is None:
        raise MissingWeightError(family, index)
    if font.file_hash is None:
        raise MissingHashError(family, index)

    # NaN is falsy as an italic marker
    is_italic = bool(font.italic_start) and not math.isnan(font.italic_start)
    style = FontStyle.ITALIC if is_italic else FontStyle.NORMAL
    return ValidatedVariant(style=style, weight=font.weight_start, file_hash=font.file_hash)


def validate_family(index: int, record: FamilyRecord) -> ValidatedFamily:
    """Convert a raw record into a fully populated one or raise a TransformError."""
    if not record.name or record.fonts is None:
        raise MissingNameOrFontsError(index)

    variants = [validate_variant(record.name, i, font) for i, font in enumerate(record.fonts)]
    return ValidatedFamily(name=record.name, variants=variants)


def transform(families: Iterable[FamilyRecord]) -> OutputTable:
    """
    Transform decoded families into the lookup table.

    Args:
        families: Decoded family records

    Returns:
        Table mapping family name to ``{normal, italic}`` weight to hash mappings

    Raises:
        TransformError: If any record lacks a name or fonts, or any font lacks
            a weight or file hash
    """
    validated = [validate_family(index, record) for index, record in enumerate(families)]

    table: dict[str, FontStyles] = {}
    for family in validated:
        styles = FontStyles()
        for variant in family.variants:
            # Later variants with the same style and weight win
            styles.for_style(variant.style)[variant.weight_key] = to_hex(variant.file_hash)
        # Weight keys are emitted in ascending numeric order, like JS integer keys
        styles.normal = dict(sorted(styles.normal.items(), key=lambda item: int(item[0])))
        styles.italic = dict(sorted(styles.italic.items(), key=lambda item: int(item[0])))
        table[family.name] = styles

    logger.debug(f"Transformed {len(table)} families")
    return OutputTable(table)
