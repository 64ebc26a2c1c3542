import pytest

from huffman_codec.bit_utils.bit_buffer import BitBuffer
from huffman_codec.bit_utils.bit_reader import BitReader
from huffman_codec.bit_utils.bit_writer import BitWriter
from huffman_codec.errors import TruncatedStream


def test_writer_packs_bits_msb_first():
    writer = BitWriter()
    writer.write_bits((0b101, 3))
    writer.write_bits((1, 1))
    buffer = writer.finish()
    assert buffer == BitBuffer(b"\xb0", 4)


def test_writer_crosses_byte_boundaries():
    writer = BitWriter()
    writer.write_bits_msb(0b1111111, 7)
    writer.write_bits_msb(0b11, 2)
    buffer = writer.finish()
    assert buffer.bit_length == 9
    assert buffer.data == b"\xff\x80"


def test_empty_writer_finishes_with_no_bits():
    buffer = BitWriter().finish()
    assert buffer.bit_length == 0
    assert buffer.data == b""


def test_writer_rejects_bad_lengths():
    writer = BitWriter()
    with pytest.raises(ValueError):
        writer.write_bits_msb(1, -1)
    with pytest.raises(ValueError):
        writer.write_bits_msb(4, 2)
    writer.write_bits_msb(123, 0)
    assert len(writer) == 0


def test_write_symbols_uses_code_table():
    codes = {ord("a"): (0, 1), ord("b"): (0b10, 2), ord("c"): (0b11, 2)}
    writer = BitWriter()
    writer.write_symbols(codes, b"abca")
    buffer = writer.finish()
    assert buffer.bit_length == 6
    assert buffer.to_bitarray().to01() == "010110"


def test_write_symbols_with_unknown_symbol_fails():
    writer = BitWriter()
    with pytest.raises(Exception):
        writer.write_symbols({ord("a"): (0, 1)}, b"ab")


def test_reader_returns_bits_in_written_order():
    writer = BitWriter()
    for bit in [1, 0, 1, 1, 0, 0, 1, 0, 1]:
        writer.write_bits((bit, 1))
    reader = BitReader(writer.finish())
    assert [reader.read_bit() for _ in range(9)] == [1, 0, 1, 1, 0, 0, 1, 0, 1]
    assert reader.remaining == 0


def test_reader_never_returns_padding():
    reader = BitReader(BitBuffer(b"\xa0", 3))
    assert [reader.read_bit() for _ in range(3)] == [1, 0, 1]
    with pytest.raises(TruncatedStream):
        reader.read_bit()


def test_failed_read_keeps_position():
    reader = BitReader(BitBuffer(b"\xff\xf0", 12))
    for _ in range(12):
        assert reader.read_bit() == 1
    with pytest.raises(TruncatedStream):
        reader.read_bit()
    assert reader.pos == 12
    assert reader.remaining == 0


def test_truncated_stream_is_also_eof_error():
    reader = BitReader(BitBuffer(b"", 0))
    with pytest.raises(EOFError):
        reader.read_bit()


def test_bit_buffer_rejects_length_beyond_capacity():
    with pytest.raises(ValueError):
        BitBuffer(b"\x00", 9)
    with pytest.raises(ValueError):
        BitBuffer(b"\x00", -1)


def test_bit_buffer_drops_padding():
    buffer = BitBuffer(b"\xff\xff", 10)
    assert buffer.byte_length == 2
    assert len(buffer.to_bitarray()) == 10
