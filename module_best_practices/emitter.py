"""Stream the bundled guide to library callers or to a terminal pager."""

from __future__ import annotations

import codecs
import contextlib
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional

import click

from module_best_practices.config import settings
from module_best_practices.errors import (
    AccessDeniedError,
    PagerUnavailableError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)

DOCUMENT_PATH = Path(__file__).resolve().parent / "guide.md"
ENCODING = "utf-8"


def open_document(path: Optional[Path] = None) -> BinaryIO:
    """Open the guide for sequential binary reading.

    Nothing is read up front. The caller owns the returned handle and is
    responsible for closing it; each call returns a fresh handle.
    """
    target = Path(path) if path is not None else DOCUMENT_PATH
    try:
        handle = target.open("rb")
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise ResourceNotFoundError(f"Guide not found at {target}") from exc
    except PermissionError as exc:
        raise AccessDeniedError(f"Permission denied reading guide at {target}") from exc
    logger.debug("Opened guide at %s", target)
    return handle


def read_document(path: Optional[Path] = None) -> bytes:
    with open_document(path) as handle:
        return handle.read()


def _read_chunks(handle: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    while True:
        chunk = handle.read(chunk_size)
        if not chunk:
            return
        yield chunk


def _decode_chunks(chunks: Iterable[bytes], encoding: str) -> Iterator[str]:
    # Incremental so multi-byte sequences may straddle chunk boundaries.
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    for chunk in chunks:
        text = decoder.decode(chunk)
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def iter_document(
    path: Optional[Path] = None, chunk_size: Optional[int] = None
) -> Iterator[bytes]:
    """Yield the guide's bytes in file order, closing the file on every exit path."""
    with open_document(path) as handle:
        yield from _read_chunks(handle, chunk_size or settings.chunk_size)


def iter_text(
    path: Optional[Path] = None,
    chunk_size: Optional[int] = None,
    encoding: str = ENCODING,
) -> Iterator[str]:
    """Yield the guide as decoded text without translating newlines."""
    with open_document(path) as handle:
        chunks = _read_chunks(handle, chunk_size or settings.chunk_size)
        yield from _decode_chunks(chunks, encoding)


def _copy(handle: BinaryIO, destination: BinaryIO, chunk_size: int) -> int:
    written = 0
    for chunk in _read_chunks(handle, chunk_size):
        destination.write(chunk)
        written += len(chunk)
    return written


def pipe(
    destination: BinaryIO,
    path: Optional[Path] = None,
    chunk_size: Optional[int] = None,
) -> int:
    """Copy the guide into ``destination`` and return the number of bytes written."""
    with open_document(path) as handle:
        written = _copy(handle, destination, chunk_size or settings.chunk_size)
    logger.debug("Piped %s bytes of the guide", written)
    return written


def _binary_stdout() -> BinaryIO:
    sys.stdout.flush()
    return sys.stdout.buffer


def display(path: Optional[Path] = None, color: Optional[bool] = None) -> None:
    """Forward the guide to the terminal pager.

    click pipes the text through ``$PAGER`` (or ``less``/``more``) when both
    stdin and stdout are terminals and writes it straight to stdout otherwise.
    The guide is opened before the pager starts so that a broken installation
    fails loudly instead of paging an empty screen. If the pager cannot be
    started at all the guide is copied to stdout unchanged.

    Raises:
        ResourceNotFoundError: The guide is missing.
        AccessDeniedError: The guide cannot be read.
        PagerUnavailableError: The pager failed after output had started.
    """
    if color is None:
        color = settings.pager_color
    chunk_size = settings.chunk_size
    with open_document(path) as handle:
        text = _decode_chunks(_read_chunks(handle, chunk_size), ENCODING)
        try:
            with contextlib.closing(text):
                click.echo_via_pager(text, color=color)
        except BrokenPipeError:
            logger.debug("Output closed before the whole guide was shown")
        except OSError as exc:
            if handle.tell():
                raise PagerUnavailableError(
                    f"Pager failed after output had started: {exc}"
                ) from exc
            logger.warning("Pager unavailable (%s); writing guide to stdout", exc)
            stdout = _binary_stdout()
            _copy(handle, stdout, chunk_size)
            stdout.flush()
