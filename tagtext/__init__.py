from tagtext.encoding import EncodingInfo, TextEncoding, detect_encoding
from tagtext.errors import CodecFailure, InvalidEncoding, TagTextError
from tagtext.text import EncodedText, decode_text, encode_text

__all__ = [
    "CodecFailure",
    "EncodedText",
    "EncodingInfo",
    "InvalidEncoding",
    "TagTextError",
    "TextEncoding",
    "decode_text",
    "detect_encoding",
    "encode_text",
]
