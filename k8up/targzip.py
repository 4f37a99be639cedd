"""A streaming writer producing a tar archive compressed with gzip."""

from __future__ import annotations

import gzip
import tarfile
from typing import Any, BinaryIO, Optional

_BLOCK = tarfile.BLOCKSIZE
_NUL = b"\0"


class TarGzipWriter:
    """Write files into a ``tar.gz`` stream on top of a binary writer.

    Start each file with :meth:`write_header`, then send exactly ``info.size``
    bytes through :meth:`write`. Closing finishes the archive but leaves the
    underlying writer open.
    """

    def __init__(self, fileobj: BinaryIO) -> None:
        self._out = fileobj
        self._gzip: Optional[gzip.GzipFile] = None
        self._remaining = 0
        self._padding = 0
        self._closed = False

    def _stream(self) -> gzip.GzipFile:
        if self._gzip is None:
            self._gzip = gzip.GzipFile(fileobj=self._out, mode="wb", mtime=0)
        return self._gzip

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("write to closed tar.gz writer")

    def _finish_entry(self) -> None:
        if self._remaining > 0:
            raise tarfile.TarError(f"missed writing {self._remaining} bytes")
        if self._padding:
            self._stream().write(_NUL * self._padding)
            self._padding = 0

    def write_header(self, info: tarfile.TarInfo) -> None:
        """Start a new file in the archive."""
        self._check_open()
        self._finish_entry()
        self._stream().write(info.tobuf(tarfile.PAX_FORMAT, "utf-8", "surrogateescape"))
        size = info.size if info.isreg() else 0
        self._remaining = size
        self._padding = -size % _BLOCK

    def write(self, data: bytes) -> int:
        """Add content to the current file; return the number of bytes taken."""
        self._check_open()
        data = bytes(data)
        if len(data) > self._remaining:
            allowed = data[: self._remaining]
            if allowed:
                self._stream().write(allowed)
            self._remaining = 0
            raise tarfile.TarError("write too long for the current tar entry")
        if data:
            self._stream().write(data)
        self._remaining -= len(data)
        return len(data)

    def close(self) -> None:
        """Finish the tar stream, then the gzip stream.

        Both are closed even if the first fails; the gzip error wins when both
        fail. Closing again does nothing.
        """
        if self._closed:
            return
        self._closed = True

        tar_error: Optional[BaseException] = None
        try:
            self._finish_entry()
            self._stream().write(_NUL * (2 * _BLOCK))
        except (tarfile.TarError, OSError) as exc:
            tar_error = exc

        gzip_error: Optional[OSError] = None
        try:
            self._stream().close()
        except OSError as exc:
            gzip_error = exc

        if gzip_error is not None:
            raise gzip_error
        if tar_error is not None:
            raise tar_error

    def __enter__(self) -> "TarGzipWriter":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()