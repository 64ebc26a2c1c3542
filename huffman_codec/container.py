"""
HUF1 container - self-describing Huffman compressed format.

Layout (little-endian):

    offset  size     field
    0       4        magic b"HUF1"
    4       8        original length in bytes (uint64)
    12      2        symbol count k (uint16), 0 <= k <= 256
    14      k*(1+4)  symbol value (uint8) + frequency (uint32), ascending symbol order
    ...     4        payload bit length (uint32)
    ...     ceil(bit length / 8) packed payload, MSB first, zero padded
"""
import struct
from enum import Enum

from huffman_codec.bit_utils.bit_buffer import BitBuffer
from huffman_codec.bit_utils.bit_reader import BitReader
from huffman_codec.bit_utils.bit_writer import BitWriter
from huffman_codec.errors import (
    EncodeError,
    InvalidHeader,
    TruncatedStream,
    UnknownSymbolReferenced,
)
from huffman_codec.frequency import ALPHABET_SIZE, char_frequency
from huffman_codec.huffman_coding import HuffmanTree

MAGIC = b"HUF1"
MAX_SYMBOLS = ALPHABET_SIZE
UINT32_MAX = 0xFFFFFFFF

HEADER_FORMAT = "<4sQH"
SYMBOL_ENTRY_FORMAT = "<BI"
BIT_LENGTH_FORMAT = "<I"


class EncoderState(Enum):
    COUNT_FREQUENCIES = "CountFrequencies"
    BUILD_TREE = "BuildTree"
    GENERATE_CODES = "GenerateCodes"
    WRITE_HEADER = "WriteHeader"
    WRITE_PAYLOAD = "WritePayload"
    DONE = "Done"


class DecoderState(Enum):
    READ_HEADER = "ReadHeader"
    REBUILD_TREE = "RebuildTree"
    READ_PAYLOAD = "ReadPayload"
    DONE = "Done"


class HuffmanEncoder:
    """
    Turns a byte buffer into a HUF1 container.
    Every stage runs once per encode() call; any error aborts the call
    and nothing is returned.
    """

    def __init__(self, verbose: bool = False) -> None:
        """
        Args:
            verbose: Whether to print information about each stage
        """
        self.verbose = verbose
        self.state = None

    def _enter(self, state: EncoderState) -> None:
        self.state = state

    def _report(self, message: str) -> None:
        if self.verbose:
            print(f"[{self.state.value}] {message}")

    def encode(self, data: bytes) -> bytes:
        """
        Compress data.

        Args:
            data: Input bytes, may be empty

        Returns:
            Container bytes

        Raises:
            EncodeError: If a count or the payload length overflows its field
        """
        data = bytes(data)

        self._enter(EncoderState.COUNT_FREQUENCIES)
        freq = char_frequency(data)
        for symbol, count in freq.items():
            if count > UINT32_MAX:
                raise EncodeError(
                    f"Symbol 0x{symbol:02x} occurs {count} times, more than a uint32 can hold"
                )
        self._report(f"{len(freq)} distinct symbols in {len(data)} bytes")

        self._enter(EncoderState.BUILD_TREE)
        tree = HuffmanTree.build_from_freq(freq)

        self._enter(EncoderState.GENERATE_CODES)
        codes = tree.codes_generation()
        bit_length = sum(freq[sym] * length for sym, (_, length) in codes.items())
        if bit_length > UINT32_MAX:
            raise EncodeError(f"Payload of {bit_length} bits does not fit a uint32 length field")
        if self.verbose:
            for line in tree.describe_codes():
                self._report(line)

        self._enter(EncoderState.WRITE_HEADER)
        header = bytearray(struct.pack(HEADER_FORMAT, MAGIC, len(data), len(freq)))
        for symbol, count in freq.items():
            header += struct.pack(SYMBOL_ENTRY_FORMAT, symbol, count)
        self._report(f"header is {len(header) + struct.calcsize(BIT_LENGTH_FORMAT)} bytes")

        self._enter(EncoderState.WRITE_PAYLOAD)
        writer = BitWriter()
        writer.write_symbols(codes, data)
        payload = writer.finish()
        header += struct.pack(BIT_LENGTH_FORMAT, payload.bit_length)
        self._report(f"{payload.bit_length} bits in {payload.byte_length} bytes")

        self._enter(EncoderState.DONE)
        return bytes(header) + payload.data


class HuffmanDecoder:
    """
    Turns a HUF1 container back into the original bytes.
    The tree is rebuilt from the stored frequencies with the same
    tie-break rule the encoder used.
    """

    def __init__(self, verbose: bool = False) -> None:
        """
        Args:
            verbose: Whether to print information about each stage
        """
        self.verbose = verbose
        self.state = None

    def _enter(self, state: DecoderState) -> None:
        self.state = state

    def _report(self, message: str) -> None:
        if self.verbose:
            print(f"[{self.state.value}] {message}")

    @staticmethod
    def _unpack(fmt: str, container: bytes, offset: int) -> tuple:
        size = struct.calcsize(fmt)
        if offset + size > len(container):
            raise TruncatedStream(
                f"Container ends at byte {len(container)}, "
                f"{size} more bytes expected at offset {offset}"
            )
        return struct.unpack_from(fmt, container, offset)

    def _read_header(self, container: bytes) -> tuple[int, dict[int, int], int, int]:
        """
        Parse and validate header.

        Returns:
            (original length, frequencies, payload bit length, payload offset)
        """
        if not container or not MAGIC.startswith(container[:len(MAGIC)]):
            raise InvalidHeader("Invalid magic number")
        _, original_length, symbol_count = self._unpack(HEADER_FORMAT, container, 0)
        if symbol_count > MAX_SYMBOLS:
            raise InvalidHeader(f"Symbol count {symbol_count} exceeds {MAX_SYMBOLS}")

        offset = struct.calcsize(HEADER_FORMAT)
        entry_size = struct.calcsize(SYMBOL_ENTRY_FORMAT)
        freq = {}
        for _ in range(symbol_count):
            symbol, count = self._unpack(SYMBOL_ENTRY_FORMAT, container, offset)
            offset += entry_size
            if symbol in freq:
                raise UnknownSymbolReferenced(f"Symbol 0x{symbol:02x} listed twice")
            if count == 0:
                raise UnknownSymbolReferenced(f"Symbol 0x{symbol:02x} listed with zero frequency")
            freq[symbol] = count

        if sum(freq.values()) != original_length:
            raise InvalidHeader(
                f"Frequencies sum to {sum(freq.values())}, original length is {original_length}"
            )

        (bit_length,) = self._unpack(BIT_LENGTH_FORMAT, container, offset)
        offset += struct.calcsize(BIT_LENGTH_FORMAT)
        if not freq and bit_length:
            raise InvalidHeader(f"Empty symbol table with {bit_length} payload bits")

        return original_length, freq, bit_length, offset

    def decode(self, container: bytes) -> bytes:
        """
        Decompress container.

        Args:
            container: Bytes produced by HuffmanEncoder.encode()

        Returns:
            Original bytes

        Raises:
            InvalidHeader: If header fields are malformed or inconsistent
            TruncatedStream: If container is shorter than its header declares
            UnknownSymbolReferenced: If symbol table or payload cannot map to a symbol
        """
        container = bytes(container)

        self._enter(DecoderState.READ_HEADER)
        original_length, freq, bit_length, offset = self._read_header(container)
        self._report(
            f"{original_length} bytes, {len(freq)} symbols, {bit_length} payload bits"
        )

        payload_size = (bit_length + 7) // 8
        available = len(container) - offset
        if available < payload_size:
            raise TruncatedStream(f"Payload has {available} bytes, {payload_size} expected")
        if available > payload_size:
            raise InvalidHeader(f"{available - payload_size} unexpected bytes after payload")

        self._enter(DecoderState.REBUILD_TREE)
        tree = HuffmanTree.build_from_freq(freq)

        self._enter(DecoderState.READ_PAYLOAD)
        output = bytearray()
        if tree.root is not None:
            reader = BitReader(BitBuffer(container[offset:], bit_length))
            for _ in range(original_length):
                output.append(tree.decode_symbol(reader))
            if reader.remaining:
                raise InvalidHeader(
                    f"{reader.remaining} payload bits left after {original_length} bytes"
                )
        self._report(f"recovered {len(output)} bytes")

        self._enter(DecoderState.DONE)
        return bytes(output)


def compress(data: bytes, verbose: bool = False) -> bytes:
    """
    Compress bytes into a HUF1 container.

    Args:
        data: Input bytes
        verbose: Whether to print stage information

    Returns:
        Container bytes
    """
    return HuffmanEncoder(verbose=verbose).encode(data)


def decompress(container: bytes, verbose: bool = False) -> bytes:
    """
    Decompress a HUF1 container.

    Args:
        container: Container bytes
        verbose: Whether to print stage information

    Returns:
        Original bytes
    """
    return HuffmanDecoder(verbose=verbose).decode(container)
