import argparse
import logging
import sys

from tagtext.encoding import TextEncoding, detect_encoding
from tagtext.errors import CodecFailure, InvalidEncoding
from tagtext.settings import get_settings
from tagtext.text import EncodedText

logger = logging.getLogger(__name__)


def parse_hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Not a hex string: {value!r}") from e


def detect(data: bytes) -> str:
    return detect_encoding(data).name


def decode(data: bytes, encoding: TextEncoding | None = None) -> str:
    text = EncodedText.detect(data) if encoding is None else EncodedText.from_bytes(encoding, data)
    return text.to_str(strict=True)


def encode(string: str, encoding: TextEncoding, include_bom: bool, include_terminator: bool) -> str:
    text = EncodedText.from_str(encoding, string, strict=True)
    return text.to_bytes(include_bom=include_bom, include_terminator=include_terminator).hex(" ")


def main(argv: list[str] | None = None) -> int:
    try:
        settings = get_settings()
    except InvalidEncoding as e:
        logging.basicConfig()
        logger.error(f"Invalid settings: {e}")
        return 2
    logging.basicConfig(level=settings.log_level)

    parser = argparse.ArgumentParser(prog="tagtext", description="Convert ID3 text between bytes and strings")
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect_parser = subparsers.add_parser("detect", help="Detect the encoding of hex bytes from their BOM")
    detect_parser.add_argument("data", type=parse_hex)

    decode_parser = subparsers.add_parser("decode", help="Decode hex bytes to text")
    decode_parser.add_argument("data", type=parse_hex)
    decode_parser.add_argument("--encoding", default=None, help="Encoding byte or name, sniffed from the BOM if omitted")

    encode_parser = subparsers.add_parser("encode", help="Encode text to hex bytes")
    encode_parser.add_argument("text")
    encode_parser.add_argument("--encoding", default=settings.default_encoding.name)
    encode_parser.add_argument("--bom", action=argparse.BooleanOptionalAction, default=settings.include_bom)
    encode_parser.add_argument(
        "--terminator", action=argparse.BooleanOptionalAction, default=settings.include_terminator
    )

    args = parser.parse_args(argv)
    try:
        match args.command:
            case "detect":
                print(detect(args.data))
            case "decode":
                encoding = TextEncoding.parse(args.encoding) if args.encoding is not None else None
                print(decode(args.data, encoding))
            case "encode":
                print(encode(args.text, TextEncoding.parse(args.encoding), args.bom, args.terminator))
    except InvalidEncoding as e:
        logger.error(e)
        return 2
    except CodecFailure as e:
        logger.error(e)
        return 1
    return 0


def main_script():
    sys.exit(main())


if __name__ == "__main__":
    main_script()
