"""Patch records - one patch entry and its byte replacements.

Records are frozen value objects built once from the patch list. The serial
shape is checked on construction; before/after lengths are not, that is the
batch validator's job.
"""

from __future__ import annotations

from typing import Annotated, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictInt, StrictStr

from ..exceptions import ShapeError
from .identifier import derive_identifier

SERIAL_LENGTH = 6

Byte = Annotated[StrictInt, Field(ge=0, le=0xFF)]
Address = Annotated[StrictInt, Field(ge=0, le=0xFFFFFFFF)]
Word = Annotated[StrictInt, Field(ge=0, le=0xFFFF)]


def check_serial(value: str) -> str:
    """Return ``value`` unchanged if it is exactly six characters long.

    Raises:
        ShapeError: for any other length
    """
    if len(value) != SERIAL_LENGTH:
        raise ShapeError("Serial number must be 6 characters", field_name="serial", value=value)
    return value


Serial = Annotated[StrictStr, AfterValidator(check_serial)]


class _RecordModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Replacement(_RecordModel):
    """One byte-range edit: an address plus original and new bytes."""

    addr: Address
    before: Tuple[Byte, ...] = Field(alias="in")
    after: Tuple[Byte, ...] = Field(alias="out")

    @property
    def length(self) -> int:
        """Byte count of the edit, taken from the original bytes."""
        return len(self.before)


class Patch(_RecordModel):
    """A named set of replacements for one release/serial/checksum build."""

    title: StrictStr
    serial: Serial
    release: Word
    checksum: Word
    replacements: Tuple[Replacement, ...]

    @property
    def identifier(self) -> str:
        return derive_identifier(self.release, self.serial, self.checksum)
