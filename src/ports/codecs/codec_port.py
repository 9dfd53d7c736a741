"""
Codec port: content digests and streaming compression transforms.
"""

from abc import ABC, abstractmethod
from typing import Protocol


class Digest(Protocol):
    """Streaming hash accumulator."""

    def update(self, data: bytes, /) -> None: ...

    def hexdigest(self) -> str: ...


class TransformStage(Protocol):
    """One byte-stream-to-byte-stream pipeline stage."""

    def process(self, chunk: bytes) -> bytes: ...

    def flush(self) -> bytes: ...


class CodecPort(ABC):
    """Port interface for hashing and lossless compression."""

    @abstractmethod
    def new_digest(self) -> Digest:
        """Return a fresh digest accumulator."""
        pass

    @abstractmethod
    def compressor(self) -> TransformStage:
        """Return a fresh compression stage."""
        pass

    @abstractmethod
    def decompressor(self) -> TransformStage:
        """
        Return a fresh decompression stage.

        The stage raises CodecError on corrupt or truncated input.
        """
        pass
