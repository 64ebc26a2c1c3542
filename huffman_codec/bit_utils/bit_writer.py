from bitarray import bitarray
from bitarray.util import int2ba

from huffman_codec.bit_utils.bit_buffer import BitBuffer


class BitWriter:
    """
    A class for writing bits to a bitarray stream.
    Bits are packed MSB first; the last byte is zero padded on finish().
    """

    def __init__(self) -> None:
        """Initialize a new BitWriter instance with an empty bitarray."""
        self.bits = bitarray(endian="big")

    def __len__(self) -> int:
        return len(self.bits)

    def write_bits_msb(self, value: int, length: int) -> None:
        """
        Write bits in MSB-first order (most significant bit first).

        Args:
            value: Integer value to write
            length: Number of bits to write

        Raises:
            ValueError: If length is negative or value does not fit in length bits
        """
        if length < 0:
            raise ValueError("Length cannot be negative")
        if length == 0:
            return
        if value < 0 or value >> length:
            raise ValueError(f"Value {value} does not fit in {length} bits")
        self.bits.extend(int2ba(value, length, endian="big"))

    def write_bits(self, codeword: tuple[int, int]) -> None:
        """
        Append one codeword.

        Args:
            codeword: (bits, length) pair
        """
        value, length = codeword
        self.write_bits_msb(value, length)

    def write_symbols(self, codes: dict[int, tuple[int, int]], data: bytes) -> None:
        """
        Append the codeword of every symbol in data, in order.

        Args:
            codes: Code table {symbol: (bits, length)}
            data: Symbols to encode

        Raises:
            ValueError: If data holds a symbol missing from codes
        """
        if not data:
            return
        table = {
            sym: int2ba(value, length, endian="big")
            for sym, (value, length) in codes.items()
        }
        self.bits.encode(table, data)

    def finish(self) -> BitBuffer:
        """
        Get written bits as zero padded bytes with the exact bit count.

        Returns:
            BitBuffer with everything written so far
        """
        return BitBuffer(self.bits.tobytes(), len(self.bits))
