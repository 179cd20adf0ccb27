import logging
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tagtext.encoding import TextEncoding, detect_encoding, strip_bom_and_terminator
from tagtext.errors import CodecFailure

logger = logging.getLogger(__name__)


def decode_text(data: bytes, encoding: TextEncoding, strict: bool = False) -> str | None:
    """Decode ``data`` and cut the result at the first NUL.

    Returns ``None`` when ``data`` is not valid in ``encoding``, unless
    ``strict`` is set, in which case ``CodecFailure`` is raised.
    """
    encoding = TextEncoding.from_tag(encoding)
    try:
        string = data.decode(encoding.codec)
    except UnicodeDecodeError as e:
        if strict:
            raise CodecFailure(encoding, f"Cannot decode {data!r} as {encoding.character_set}") from e
        logger.warning(f"Failed to decode {len(data)} bytes as {encoding.character_set}: {e}")
        return None
    return string.split("\x00", 1)[0]


def encode_text(string: str, encoding: TextEncoding, strict: bool = False) -> bytes | None:
    """Encode ``string``, returning ``None`` if it has characters ``encoding`` cannot represent."""
    encoding = TextEncoding.from_tag(encoding)
    try:
        return string.encode(encoding.codec)
    except UnicodeEncodeError as e:
        if strict:
            raise CodecFailure(encoding, f"Cannot encode {string!r} as {encoding.character_set}") from e
        logger.warning(f"Failed to encode {string!r} as {encoding.character_set}: {e}")
        return None


class EncodedText(BaseModel):
    """Text from an ID3 frame, kept as an encoding plus its raw bytes.

    ``value`` is normalized when it is set: a leading byte-order mark and up to
    two trailing zero bytes are removed, whatever form the bytes came in.

    ``value`` is frozen after construction; copies with an updated ``value``
    are rebuilt so the new bytes are normalized as well. ``encoding`` may be
    reassigned on its own. This does not re-encode ``value``; only do it when
    the stored bytes are valid in the new encoding.
    """

    model_config = ConfigDict(validate_assignment=True)

    encoding: TextEncoding
    value: bytes = Field(default=b"", frozen=True)

    @field_validator("encoding", mode="before")
    @classmethod
    def check_encoding(cls, v: Any) -> TextEncoding:
        return TextEncoding.from_tag(v)

    @field_validator("value", mode="before")
    @classmethod
    def check_value(cls, v: Any) -> bytes:
        if isinstance(v, (bytearray, memoryview)):
            v = bytes(v)
        if not isinstance(v, bytes):
            raise ValueError(f"Expected bytes, got {type(v).__name__}")
        return strip_bom_and_terminator(v)

    @classmethod
    def from_bytes(cls, encoding: TextEncoding | int, data: bytes) -> Self:
        return cls(encoding=encoding, value=data)

    @classmethod
    def from_str(cls, encoding: TextEncoding | int, string: str, strict: bool = False) -> Self | None:
        encoding = TextEncoding.from_tag(encoding)
        data = encode_text(string, encoding, strict=strict)
        if data is None:
            return None
        return cls(encoding=encoding, value=data)

    @classmethod
    def detect(cls, data: bytes) -> Self:
        """Build a value from bytes whose encoding is given by their byte-order mark."""
        return cls(encoding=detect_encoding(data), value=data)

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> Self:
        if not update:
            return super().model_copy(deep=deep)
        return type(self)(**(dict(self) | update))

    @property
    def character_set(self) -> str:
        return self.encoding.character_set

    def to_str(self, strict: bool = False) -> str | None:
        return decode_text(self.value, self.encoding, strict=strict)

    def to_bytes(self, include_bom: bool = False, include_terminator: bool = False) -> bytes:
        encoding = self.encoding
        bom = encoding.bom if include_bom else b""
        terminator = encoding.terminator if include_terminator else b""
        if not bom and not terminator:
            return self.value
        return bom + self.value + terminator

    def __str__(self) -> str:
        return self.to_str() or ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodedText):
            return NotImplemented
        return self.encoding == other.encoding and self.value == other.value
