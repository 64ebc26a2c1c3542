from bitarray import bitarray


class BitBuffer:
    """
    Bytes holding a bit sequence together with its exact length in bits.
    Bits past ``bit_length`` are padding and never read as data.
    """

    def __init__(self, data: bytes, bit_length: int) -> None:
        """
        Args:
            data: Backing bytes, bits packed MSB first
            bit_length: Number of meaningful bits

        Raises:
            ValueError: If bit_length is negative or exceeds the backing capacity
        """
        if bit_length < 0:
            raise ValueError("Bit length cannot be negative")
        if bit_length > len(data) * 8:
            raise ValueError(
                f"Bit length {bit_length} exceeds capacity of {len(data)} bytes"
            )
        self.data = bytes(data)
        self.bit_length = bit_length

    @property
    def byte_length(self) -> int:
        return len(self.data)

    def to_bitarray(self) -> bitarray:
        """
        Get the meaningful bits, padding removed.

        Returns:
            A big-endian bitarray of exactly bit_length bits
        """
        bits = bitarray(endian="big")
        bits.frombytes(self.data)
        del bits[self.bit_length:]
        return bits

    def __eq__(self, other):
        if not isinstance(other, BitBuffer):
            return NotImplemented
        return self.data == other.data and self.bit_length == other.bit_length

    def __repr__(self):
        return f"BitBuffer(bit_length={self.bit_length}, byte_length={self.byte_length})"
