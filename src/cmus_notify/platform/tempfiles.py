"""
Summary: Scoped temporary files that are deleted when their owner closes them.
Why: Embedded artwork must stay on disk until a notification has displayed it.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from types import TracebackType
from typing import Final, Self, final


TEMP_FILE_PREFIX: Final[str] = "cmus-notify-"


@final
class TempFile:
    """Owning handle to a temporary file on disk.

    The backing file survives until :meth:`close` is called or the ``with``
    block using the handle exits. Closing twice is harmless.
    """

    __slots__ = ("_path", "_closed")

    def __init__(self, path: Path) -> None:
        self._path = path
        self._closed = False

    @classmethod
    def with_contents(cls, data: bytes, *, suffix: str = "") -> Self:
        """Allocate a new temporary file holding ``data``.

        Raises:
            OSError: If the file cannot be created or written.
        """
        handle = tempfile.NamedTemporaryFile(
            prefix=TEMP_FILE_PREFIX,
            suffix=suffix,
            delete=False,
        )
        path = Path(handle.name)
        try:
            with handle:
                _ = handle.write(data)
        except OSError:
            path.unlink(missing_ok=True)
            raise
        return cls(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def read_bytes(self) -> bytes:
        if self._closed:
            raise ValueError(f"Temporary file already released: {self._path}")
        return self._path.read_bytes()

    def close(self) -> None:
        """Delete the backing file."""

        if self._closed:
            return
        self._closed = True
        self._path.unlink(missing_ok=True)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"TempFile({str(self._path)!r}, {state})"


__all__ = ["TEMP_FILE_PREFIX", "TempFile"]
