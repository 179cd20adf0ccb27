class TagTextError(Exception):
    """Base class for all tagtext errors."""


class InvalidEncoding(TagTextError):
    """The encoding tag is not one of the four ID3 text encodings."""

    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"Invalid text encoding {tag!r}")


class CodecFailure(TagTextError):
    """Text could not be decoded from, or encoded to, the requested encoding."""

    def __init__(self, encoding, message: str):
        self.encoding = encoding
        super().__init__(message)
