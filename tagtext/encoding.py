import operator
from enum import IntEnum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict

from tagtext.errors import InvalidEncoding

UTF16LE_BOM = b"\xff\xfe"
UTF16BE_BOM = b"\xfe\xff"
UTF8_BOM = b"\xef\xbb\xbf"


class EncodingInfo(BaseModel):
    """Fixed metadata of one ID3 text encoding."""

    model_config = ConfigDict(frozen=True)

    character_set: str
    codec: str
    bom: bytes
    terminator: bytes


class TextEncoding(IntEnum):
    """ID3v2 text encodings, valued as the encoding byte of a frame.

    The values match ``mutagen.id3.Encoding``.
    """

    LATIN1 = 0
    UTF16 = 1
    UTF16BE = 2
    UTF8 = 3

    @classmethod
    def from_tag(cls, tag: Any) -> Self:
        """Convert a numeric encoding byte into a ``TextEncoding``.

        Raises ``InvalidEncoding`` for anything outside 0-3.
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, bool):
            raise InvalidEncoding(tag)
        try:
            return cls(operator.index(tag))
        except (TypeError, ValueError) as e:
            raise InvalidEncoding(tag) from e

    @classmethod
    def parse(cls, value: str | int) -> Self:
        """Accept an encoding byte (``3``, ``"3"``) or a name (``"utf8"``)."""
        if isinstance(value, str):
            value = value.strip()
            if value.isdigit():
                return cls.from_tag(int(value))
            name = value.upper().replace("-", "")
            if name in cls.__members__:
                return cls[name]
            raise InvalidEncoding(value)
        return cls.from_tag(value)

    @property
    def info(self) -> EncodingInfo:
        return ENCODING_INFO[self]

    @property
    def character_set(self) -> str:
        return self.info.character_set

    @property
    def codec(self) -> str:
        return self.info.codec

    @property
    def bom(self) -> bytes:
        return self.info.bom

    @property
    def terminator(self) -> bytes:
        return self.info.terminator


ENCODING_INFO: dict[TextEncoding, EncodingInfo] = {
    TextEncoding.LATIN1: EncodingInfo(character_set="ISO-8859-1", codec="latin-1", bom=b"", terminator=b"\x00"),
    TextEncoding.UTF16: EncodingInfo(
        character_set="UTF-16LE", codec="utf-16-le", bom=UTF16LE_BOM, terminator=b"\x00\x00"
    ),
    TextEncoding.UTF16BE: EncodingInfo(
        character_set="UTF-16BE", codec="utf-16-be", bom=UTF16BE_BOM, terminator=b"\x00\x00"
    ),
    TextEncoding.UTF8: EncodingInfo(character_set="UTF-8", codec="utf-8", bom=b"", terminator=b"\x00"),
}


def detect_encoding(data: bytes) -> TextEncoding:
    """Guess the encoding of ``data`` from its byte-order mark, defaulting to Latin-1."""
    if data.startswith(UTF16LE_BOM):
        return TextEncoding.UTF16
    if data.startswith(UTF16BE_BOM):
        return TextEncoding.UTF16BE
    if data.startswith(UTF8_BOM):
        return TextEncoding.UTF8
    return TextEncoding.LATIN1


def leading_bom_length(data: bytes) -> int:
    # Any known BOM is stripped, whatever the declared encoding
    if data.startswith((UTF16BE_BOM, UTF16LE_BOM)):
        return 2
    if data.startswith(UTF8_BOM):
        return 3
    return 0


def trailing_terminator_length(data: bytes, leading: int = 0) -> int:
    """Count trailing zero bytes to strip, at most two.

    A zero at offset ``-i`` is only stripped while more than ``i`` bytes
    would remain, so a buffer made of zeros is never emptied by this rule.
    """
    trailing = 0
    for i in (1, 2):
        if len(data) - leading - trailing > i and data[-i] == 0:
            trailing += 1
        else:
            break
    return trailing


def strip_bom_and_terminator(data: bytes) -> bytes:
    leading = leading_bom_length(data)
    trailing = trailing_terminator_length(data, leading)
    if leading + trailing == 0:
        return data
    return data[leading : len(data) - trailing]
