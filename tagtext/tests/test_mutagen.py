import logging

import pytest
from mutagen.id3 import TIT2, TPE1, Encoding

from tagtext.encoding import TextEncoding
from tagtext.errors import CodecFailure
from tagtext.mutagen import frame_from_texts, texts_from_frame
from tagtext.text import EncodedText


class TestTextsFromFrame:
    def test_utf16(self):
        texts = texts_from_frame(TIT2(encoding=Encoding.UTF16, text=["AB", "C"]))
        assert [t.encoding for t in texts] == [TextEncoding.UTF16, TextEncoding.UTF16]
        assert texts[0].value == b"A\x00B\x00"
        assert texts[1].value == b"C\x00"
        assert [t.to_str() for t in texts] == ["AB", "C"]

    def test_utf8(self):
        (text,) = texts_from_frame(TPE1(encoding=3, text=["Bicep"]))
        assert text == EncodedText.from_bytes(TextEncoding.UTF8, b"Bicep")

    def test_empty_string(self):
        (text,) = texts_from_frame(TIT2(encoding=Encoding.UTF16, text=[""]))
        assert text.value == b""
        assert text.to_str() == ""

    def test_skips_unrepresentable(self, caplog):
        with caplog.at_level(logging.WARNING):
            texts = texts_from_frame(TIT2(encoding=Encoding.LATIN1, text=["ok", "☺"]))
        assert [t.to_str() for t in texts] == ["ok"]
        assert "Skipping TIT2" in caplog.text


class TestFrameFromTexts:
    def test_build(self):
        frame = frame_from_texts(
            TPE1, [EncodedText.from_str(TextEncoding.UTF8, "A"), EncodedText.from_str(TextEncoding.UTF8, "B")]
        )
        assert isinstance(frame, TPE1)
        assert frame.encoding == Encoding.UTF8
        assert list(frame.text) == ["A", "B"]

    def test_round_trip(self):
        frame = TIT2(encoding=Encoding.UTF16BE, text=["Strings of Life"])
        assert list(frame_from_texts(TIT2, texts_from_frame(frame)).text) == ["Strings of Life"]

    def test_empty(self):
        with pytest.raises(ValueError):
            frame_from_texts(TIT2, [])

    def test_mixed_encodings(self):
        with pytest.raises(ValueError, match="mixed encodings"):
            frame_from_texts(
                TIT2, [EncodedText.from_str(TextEncoding.UTF8, "A"), EncodedText.from_str(TextEncoding.LATIN1, "B")]
            )

    def test_undecodable(self):
        with pytest.raises(CodecFailure):
            frame_from_texts(TIT2, [EncodedText.from_bytes(TextEncoding.UTF8, b"\xc3\x28")])
