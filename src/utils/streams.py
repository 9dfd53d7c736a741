"""Read -> transform -> write pipeline composition.

``pipe`` runs the whole pipeline as one blocking call. The first error raised
by any stage propagates unchanged; callers open the streams in ``with`` blocks
so every descriptor is released on that path too.
"""

from __future__ import annotations

from typing import BinaryIO, Callable, Iterable, Optional

from src.ports.codecs.codec_port import Digest, TransformStage

DEFAULT_CHUNK_SIZE = 64 * 1024


def read_chunks(reader: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterable[bytes]:
    while True:
        chunk = reader.read(chunk_size)
        if not chunk:
            return
        yield chunk


def pipe(
    reader: BinaryIO,
    writer: Optional[BinaryIO] = None,
    stages: Iterable[TransformStage] = (),
    digest: Optional[Digest] = None,
    sink: Optional[Callable[[bytes], None]] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Stream ``reader`` through ``stages`` into ``writer``/``digest``/``sink``.

    Returns the number of bytes delivered downstream of the last stage.
    """
    stages = list(stages)
    total = 0

    def _emit(data: bytes) -> None:
        nonlocal total
        if not data:
            return
        if digest is not None:
            digest.update(data)
        if writer is not None:
            writer.write(data)
        if sink is not None:
            sink(data)
        total += len(data)

    def _through(data: bytes, start: int) -> bytes:
        for stage in stages[start:]:
            data = stage.process(data)
        return data

    for chunk in read_chunks(reader, chunk_size):
        _emit(_through(chunk, 0))
    # Flush each stage and push its tail through the stages after it
    for i, stage in enumerate(stages):
        _emit(_through(stage.flush(), i + 1))
    if writer is not None:
        writer.flush()
    return total
