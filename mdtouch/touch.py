"""Create-or-update for a single path, mirroring Unix `touch`.

A missing path becomes an empty regular file. An existing entry (file or
directory) gets its access and modification times set to `now`.
"""
import os
import time
from collections.abc import Iterable

from strenum import StrEnum

from mdtouch.utils.logger import LOGGER

# No O_TRUNC: an entry created between the stat and the open keeps its content
_CREATE_FLAGS = os.O_WRONLY | os.O_CREAT | getattr(os, "O_BINARY", 0)
_CREATE_MODE = 0o666


class TouchErrorKind(StrEnum):
    CREATE = "create"
    SET_TIME = "set_time"
    IO = "io"


class TouchError(Exception):
    """A single path could not be touched."""

    def __init__(self, kind: TouchErrorKind, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.kind = kind
        self.path = path
        self.reason = reason

    @classmethod
    def from_exception(
        cls, kind: TouchErrorKind, path: str, exc: Exception
    ) -> "TouchError":
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        return cls(kind, path, reason)


def _exists(path: str) -> bool:
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except (OSError, ValueError) as e:
        raise TouchError.from_exception(TouchErrorKind.IO, path, e) from e
    return True


def _create(path: str) -> None:
    try:
        fd = os.open(path, _CREATE_FLAGS, _CREATE_MODE)
    except OSError as e:
        raise TouchError.from_exception(TouchErrorKind.CREATE, path, e) from e
    os.close(fd)


def _set_times(path: str, now: int) -> None:
    try:
        os.utime(path, ns=(now, now))
    except OSError as e:
        raise TouchError.from_exception(TouchErrorKind.SET_TIME, path, e) from e


def touch(path: str | os.PathLike, now: int | None = None) -> None:
    """Create `path` as an empty file, or set its atime and mtime to `now`.

    Args:
        path: The file to touch. Interpreted literally, no globbing.
        now: Target timestamp in nanoseconds since the epoch. Defaults to the
            current time.

    Raises:
        TouchError: CREATE if a new file could not be created, SET_TIME if the
            timestamps of an existing entry could not be updated, IO for any
            other failure while inspecting the path.
    """
    path = os.fspath(path)
    if not path:
        raise TouchError(TouchErrorKind.IO, path, "empty path")
    if now is None:
        now = time.time_ns()

    if not _exists(path):
        _create(path)
        LOGGER.debug("Created %s", path)
        return

    _set_times(path, now)
    LOGGER.debug("Updated timestamps of %s", path)


def touch_all(paths: Iterable[str], now: int | None = None) -> list[TouchError]:
    """Touch each path in order with one shared timestamp, collecting failures.

    A failure on one path never stops the others, and successes are kept.
    """
    if now is None:
        now = time.time_ns()
    errors = []
    for path in paths:
        try:
            touch(path, now)
        except TouchError as e:
            LOGGER.debug("Failed to touch %s (%s): %s", e.path, e.kind, e.reason)
            errors.append(e)
    return errors
