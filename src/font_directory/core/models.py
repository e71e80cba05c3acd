"""Data models for decoded directory records and the generated lookup table."""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, RootModel, ValidationError

from .exceptions import InvalidDataFileError, UnknownFontError


class FontStyle(Enum):
    """Style axis of a font variant."""

    NORMAL = "normal"
    ITALIC = "italic"


@dataclass(frozen=True)
class FontVariant:
    """One font of a family as decoded from the directory.

    Every field is optional in the directory schema; ``None`` means the field
    was absent from the payload.
    """

    weight_start: int | None = None
    italic_start: float | None = None
    file_hash: bytes | None = None


@dataclass(frozen=True)
class FamilyRecord:
    """A font family as decoded from the directory."""

    name: str | None = None
    fonts: list[FontVariant] | None = field(default=None)


@dataclass(frozen=True)
class ValidatedVariant:
    """A font variant with every field the table needs."""

    style: FontStyle
    weight: int
    file_hash: bytes

    @property
    def weight_key(self) -> str:
        return str(self.weight)


@dataclass(frozen=True)
class ValidatedFamily:
    name: str
    variants: list[ValidatedVariant]


class FontStyles(BaseModel):
    """Weight to file hash mappings for both style axes of a family."""

    normal: dict[str, str] = Field(default_factory=dict)
    italic: dict[str, str] = Field(default_factory=dict)

    def for_style(self, style: FontStyle) -> dict[str, str]:
        return self.italic if style is FontStyle.ITALIC else self.normal


class OutputTable(RootModel[dict[str, FontStyles]]):
    """Lookup table from family name to its style mappings."""

    root: dict[str, FontStyles] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, family: str) -> bool:
        return family in self.root

    def __getitem__(self, family: str) -> FontStyles:
        try:
            return self.root[family]
        except KeyError:
            raise UnknownFontError(family) from None

    def to_json(self) -> str:
        """Serialize to compact JSON, preserving family insertion order."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str) -> "OutputTable":
        return cls.model_validate_json(data)

    @classmethod
    def load(cls, path: str | Path) -> "OutputTable":
        """Load a previously generated data file."""
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                table = cls.model_validate(json.load(f))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            raise InvalidDataFileError(str(path), str(e)) from e

        for family, styles in table.root.items():
            for weight in [*styles.normal, *styles.italic]:
                try:
                    int(weight)
                except ValueError:
                    raise InvalidDataFileError(
                        str(path), f"non-numeric weight {weight!r} in {family}"
                    ) from None
        return table

    def family_names(self) -> list[str]:
        return list(self.root)

    def weights(self, family: str, style: FontStyle = FontStyle.NORMAL) -> list[str]:
        """Weight keys available for a family in the given style, numerically sorted."""
        return sorted(self[family].for_style(style), key=int)

    def font_hash(
        self, family: str, weight: int | str, style: FontStyle = FontStyle.NORMAL
    ) -> str:
        mapping = self[family].for_style(style)
        try:
            return mapping[str(weight)]
        except KeyError:
            raise UnknownFontError(family, str(weight)) from None

    def variant_count(self) -> int:
        return sum(len(styles.normal) + len(styles.italic) for styles in self.root.values())
