from huffman_codec.bit_utils.bit_buffer import BitBuffer
from huffman_codec.errors import TruncatedStream


class BitReader:
    """
    A class for reading bits back from a BitBuffer in the order they were written.
    Padding past the declared bit length is never returned.
    """

    def __init__(self, buffer: BitBuffer) -> None:
        """
        Initialize BitReader over the meaningful bits of a buffer.

        Args:
            buffer: BitBuffer produced by BitWriter.finish()
        """
        self.bits = buffer.to_bitarray()
        self.pos = 0

    @property
    def remaining(self) -> int:
        """Number of bits not read yet."""
        return len(self.bits) - self.pos

    def read_bit(self) -> int:
        """
        Read one bit from the stream.

        Returns:
            The bit value (0 or 1)

        Raises:
            TruncatedStream: If the declared bit length is exhausted
        """
        if self.pos >= len(self.bits):
            raise TruncatedStream(
                f"Bit {self.pos} requested, stream holds {len(self.bits)} bits"
            )
        val = self.bits[self.pos]
        self.pos += 1
        return val
