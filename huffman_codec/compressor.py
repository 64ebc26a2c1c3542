import io
from abc import ABC, abstractmethod
from typing import BinaryIO, Tuple

from huffman_codec.container import compress, decompress


class Compressor(ABC):
    """
    Interface describing compression and decompression of files,
    streams and byte strings with one algorithm.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Read bytes from the input stream, compress them and write
        the compressed data to the output stream.

        Args:
            input_stream: Input stream with data
            output_stream: Output stream for compressed data

        Returns:
            String with information for logging
        """
        pass

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Read compressed bytes from the input stream, decompress them and
        write the result to the output stream.

        Args:
            input_stream: Input stream with compressed data
            output_stream: Output stream for decompressed data

        Returns:
            String with information for logging
        """
        pass

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper method for compressing a file. The output file is only
        created once compression succeeded.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file

        Returns:
            Compression information
        """
        with open(input_file, 'rb') as in_file:
            data = in_file.read()
        result, log_info = cls.compress_bytes(data, **kwargs)
        with open(output_file, 'wb') as out_file:
            out_file.write(result)
        return log_info

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper method for decompressing a file. The output file is only
        created once decompression succeeded.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file

        Returns:
            Decompression information
        """
        with open(input_file, 'rb') as in_file:
            data = in_file.read()
        result, log_info = cls.decompress_bytes(data, **kwargs)
        with open(output_file, 'wb') as out_file:
            out_file.write(result)
        return log_info

    @classmethod
    def compress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper method for compressing bytes.

        Args:
            data: Input data to compress

        Returns:
            Tuple (compressed data, compression information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper method for decompressing bytes.

        Args:
            data: Compressed data

        Returns:
            Tuple (decompressed data, decompression information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info


class HuffmanCompressor(Compressor):
    """
    Whole-buffer Huffman compressor writing HUF1 containers.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.log = []

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        data = input_stream.read()
        result = compress(data, verbose=self.verbose)
        output_stream.write(result)

        diff = len(data) - len(result)
        if diff > 0:
            ratio = (1 - len(result) / len(data)) * 100
            self.log.append(f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)")
        else:
            self.log.append(f"Size increased by {-diff} bytes")
        return '\n'.join(self.log)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        data = input_stream.read()
        result = decompress(data, verbose=self.verbose)
        output_stream.write(result)

        self.log.append(f"Restored {len(result)} bytes from {len(data)} compressed bytes")
        return '\n'.join(self.log)
