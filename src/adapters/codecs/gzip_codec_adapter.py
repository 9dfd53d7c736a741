"""
Codec adapter: SHA-256 digests and gzip compression via streaming zlib objects.
"""

import hashlib
import logging
import zlib
from typing import Optional

from typing_extensions import override

from src.exceptions import CodecError
from src.ports.codecs.codec_port import CodecPort, Digest, TransformStage

# zlib window bits selecting the gzip container
GZIP_WBITS = 16 + zlib.MAX_WBITS


class _CompressStage:
    def __init__(self, level: int) -> None:
        self._obj = zlib.compressobj(level, zlib.DEFLATED, GZIP_WBITS)

    def process(self, chunk: bytes) -> bytes:
        try:
            return self._obj.compress(chunk)
        except zlib.error as e:
            raise CodecError(f"Compression failed: {e}")

    def flush(self) -> bytes:
        try:
            return self._obj.flush()
        except zlib.error as e:
            raise CodecError(f"Compression failed: {e}")


class _DecompressStage:
    def __init__(self) -> None:
        self._obj = zlib.decompressobj(GZIP_WBITS)

    def process(self, chunk: bytes) -> bytes:
        if self._obj.eof:
            if chunk:
                raise CodecError("Trailing data after end of compressed stream")
            return b""
        try:
            return self._obj.decompress(chunk)
        except zlib.error as e:
            raise CodecError(f"Decompression failed: {e}")

    def flush(self) -> bytes:
        try:
            tail = self._obj.flush()
        except zlib.error as e:
            raise CodecError(f"Decompression failed: {e}")
        if not self._obj.eof:
            raise CodecError("Compressed stream is truncated")
        return tail


class GzipCodecAdapter(CodecPort):
    """Codec implementation backed by hashlib and zlib."""

    def __init__(
        self,
        level: int = 9,
        digest_name: str = "sha256",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._level = level
        self._digest_name = digest_name
        self._logger = logger or logging.getLogger(__name__)

    @override
    def new_digest(self) -> Digest:
        return hashlib.new(self._digest_name)

    @override
    def compressor(self) -> TransformStage:
        return _CompressStage(self._level)

    @override
    def decompressor(self) -> TransformStage:
        return _DecompressStage()
