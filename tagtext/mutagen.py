import logging

from mutagen.id3 import TextFrame

from tagtext.encoding import TextEncoding
from tagtext.text import EncodedText, encode_text

logger = logging.getLogger(__name__)


def texts_from_frame(frame: TextFrame) -> list[EncodedText]:
    """Returns one encoded value per string of a mutagen text frame.

    mutagen keeps frame text decoded, so each string is re-encoded with the
    frame's encoding and terminated the way it is stored in the tag. Strings
    the encoding cannot hold are skipped.
    """
    encoding = TextEncoding.from_tag(frame.encoding)
    texts = []
    for string in frame.text:
        data = encode_text(str(string), encoding)
        if data is None:
            logger.warning(f"Skipping {frame.FrameID} text not representable in {encoding.character_set}: {string!r}")
            continue
        # Append the terminator so the strip loop only removes it
        texts.append(EncodedText.from_bytes(encoding, data + encoding.terminator if data else data))
    return texts


def frame_from_texts(frame_cls: type[TextFrame], texts: list[EncodedText]) -> TextFrame:
    """Builds a mutagen text frame, e.g. ``TIT2``, from values sharing one encoding."""
    if not texts:
        raise ValueError("Cannot build a frame without text")
    encodings = {text.encoding for text in texts}
    if len(encodings) > 1:
        raise ValueError(f"Texts have mixed encodings: {sorted(e.name for e in encodings)}")
    encoding = encodings.pop()
    return frame_cls(
        encoding=int(encoding),
        text=[text.to_str(strict=True) for text in texts],
    )

