"""
Exceptions raised by the Huffman codec
"""


class HuffmanError(ValueError):
    """Base class for every error raised by the codec."""


class EncodeError(HuffmanError):
    """Input cannot be represented in the container format."""


class DecodeError(HuffmanError):
    """Base class for failures while reading a container."""


class InvalidHeader(DecodeError):
    """
    Header is malformed: wrong magic, impossible symbol count,
    frequencies that disagree with the original length, or a payload
    whose size does not match what the header declares.
    """


class TruncatedStream(DecodeError, EOFError):
    """Data ended before everything the header declares could be read."""


class UnknownSymbolReferenced(DecodeError):
    """
    Symbol table cannot describe a valid tree (duplicate or empty
    entries), or the payload walks into a branch with no symbol.
    """
