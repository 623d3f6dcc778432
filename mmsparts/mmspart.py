"""MMS message parts as exchanged with the messaging service.

A part is described by its file name, content type and content id. The
descriptor-carrying variant additionally owns a read-only file descriptor
for the part's data, so the receiving side can read it without access to
the sender's file system.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple


@dataclass
class MmsPart:
    """An MMS part referenced by file name."""

    file_name: str = ""
    content_type: str = ""
    content_id: str = ""

    def to_struct(self) -> Tuple[str, str, str]:
        """Return the part as a ``(file_name, content_type, content_id)`` struct."""
        return (self.file_name, self.content_type, self.content_id)

    @classmethod
    def from_struct(cls, struct: Iterable[Any]) -> "MmsPart":
        """Build a part from a three-field struct."""
        file_name, content_type, content_id = struct
        return cls(str(file_name), str(content_type), str(content_id))


class MmsPartFd:
    """An MMS part that owns a read-only file descriptor for its data.

    The descriptor is closed when the part is closed, used as a context
    manager, or garbage collected. Copies and parts built from a struct
    hold their own duplicate of the descriptor.
    """

    def __init__(
        self,
        file_name: str = "",
        content_type: str = "",
        content_id: str = "",
        *,
        fd: Optional[int] = None,
    ) -> None:
        self.file_name = file_name
        self.content_type = content_type
        self.content_id = content_id
        self._fd: Optional[int] = fd

    @classmethod
    def open(cls, path: "os.PathLike[str] | str", content_type: str, content_id: str) -> "MmsPartFd":
        """Open ``path`` read-only and wrap it as a part.

        If the file cannot be opened the part is still created, but it
        holds no descriptor.
        """
        path = os.fspath(path)
        try:
            fd: Optional[int] = os.open(path, os.O_RDONLY)
        except OSError:
            fd = None
        return cls(os.path.basename(path), content_type, content_id, fd=fd)

    def copy(self) -> "MmsPartFd":
        """Return a copy holding a duplicate of this part's descriptor."""
        fd = os.dup(self._fd) if self._fd is not None else None
        return type(self)(self.file_name, self.content_type, self.content_id, fd=fd)

    def fileno(self) -> int:
        """Return the owned descriptor; raise ValueError if there is none."""
        if self._fd is None:
            raise ValueError("part has no open file")
        return self._fd

    def is_open(self) -> bool:
        """Tell whether the part holds an open descriptor."""
        return self._fd is not None

    def close(self) -> None:
        """Close the owned descriptor, if any."""
        fd, self._fd = self._fd, None
        if fd is not None:
            try:
                os.close(fd)
            except OSError:
                pass

    def to_struct(self) -> Tuple[Optional[int], str, str, str]:
        """Return ``(fd, file_name, content_type, content_id)``.

        The descriptor is ``None`` when no file is open; it stays owned by
        this part.
        """
        return (self._fd, self.file_name, self.content_type, self.content_id)

    @classmethod
    def from_struct(cls, struct: Iterable[Any]) -> "MmsPartFd":
        """Build a part from a four-field struct, duplicating its descriptor.

        A descriptor of ``None`` or a negative value yields a part with no
        open file. The caller keeps ownership of the descriptor it passed.
        """
        fd, file_name, content_type, content_id = struct
        own_fd = os.dup(fd) if fd is not None and fd >= 0 else None
        return cls(str(file_name), str(content_type), str(content_id), fd=own_fd)

    def __enter__(self) -> "MmsPartFd":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(file_name={self.file_name!r}, "
            f"content_type={self.content_type!r}, content_id={self.content_id!r}, "
            f"fd={self._fd!r})"
        )