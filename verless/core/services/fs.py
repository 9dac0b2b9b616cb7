"""
Filesystem helpers — content file streaming and directory utilities.

The centerpiece is ``stream_files``: a recursive walk that pushes every
file passing a chain of filters onto a bounded ``PathChannel``.  The walk
runs on the caller's thread and blocks whenever the channel is full, so
it is meant to run as a producer thread while somebody else consumes::

    stream = FileStream("content", markdown_only, no_underscores).start()
    for path in stream:
        render(path)
    stream.wait()   # raises WalkError if the walk aborted

Contract
────────
- The channel is closed exactly once: after a complete walk, after a
  failed walk, and when the root does not exist.
- Only paths travel through the channel.  Walk errors are raised from
  ``stream_files`` (or stored on the ``FileStream``), never sent.
- Closure + no error means "complete"; closure + error means "partial
  results, walk failed".
"""

from __future__ import annotations

import logging
import os
import queue
import shutil
import threading
from pathlib import Path
from typing import Callable, Iterator

logger = logging.getLogger(__name__)

FilterPredicate = Callable[[str], bool]

DEFAULT_CAPACITY = 64

# Marks the end of the stream inside the queue
_CLOSED = object()


class WalkError(Exception):
    """Raised when an entry cannot be read while walking a directory tree."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Cannot walk {path}: {message}")
        self.path = path


class ChannelClosedError(Exception):
    """Raised when sending on, or closing, an already closed channel."""


# ═══════════════════════════════════════════════════════════════════════
#  Filters
# ═══════════════════════════════════════════════════════════════════════


def has_extension(ext: str) -> FilterPredicate:
    """Build a filter that only lets pass files with extension *ext*.

    The extension includes the leading dot (``".md"``) and is compared
    case-sensitively.
    """

    def _filter(file: str) -> bool:
        return os.path.splitext(file)[1] == ext

    _filter.__name__ = f"has_extension({ext!r})"
    return _filter


def markdown_only(file: str) -> bool:
    """Only let pass Markdown files."""
    return os.path.splitext(file)[1] == ".md"


def no_underscores(file: str) -> bool:
    """Drop files whose name starts with an underscore."""
    return not os.path.basename(file).startswith("_")


def passes(file: str, filters: tuple[FilterPredicate, ...] | list[FilterPredicate]) -> bool:
    """Return True if *file* passes every filter (stops at the first miss)."""
    return all(f(file) for f in filters)


# ═══════════════════════════════════════════════════════════════════════
#  Channel
# ═══════════════════════════════════════════════════════════════════════


class PathChannel:
    """Bounded, closable queue of path strings.

    ``send`` blocks while the buffer is full.  Iterating yields paths
    until the channel is closed and drained.  Several consumers may
    iterate concurrently; each stops at closure.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Channel capacity must be at least 1, got {capacity}")
        self._queue: queue.Queue[object] = queue.Queue(maxsize=capacity)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, path: str) -> None:
        if self._closed:
            raise ChannelClosedError("send on closed channel")
        self._queue.put(path)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                raise ChannelClosedError("channel already closed")
            self._closed = True
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[str]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                # Hand the marker on to any other consumer
                self._queue.put(_CLOSED)
                return
            yield item  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════
#  Streaming
# ═══════════════════════════════════════════════════════════════════════


def stream_files(
    root: str | os.PathLike[str],
    files: PathChannel,
    *filters: FilterPredicate,
) -> None:
    """Send the relative paths of all files under *root* matching *filters*.

    Directories are traversed but never sent.  Filters receive the
    traversal path (``content/blog/post.md``); the channel receives the
    path relative to *root* (``blog/post.md``).  With a root of ``.``
    the traversal path is already relative and is sent unchanged.

    Args:
        root: Directory to walk.  Trailing separators are ignored.
        files: Channel to send matching paths on.  Always closed on return.
        filters: Predicates that must all return True for a file to pass.

    Raises:
        WalkError: If a directory entry cannot be read, or *root* is not
            a directory.  The channel is closed before this is raised.
    """
    top = os.path.normpath(os.fspath(root))

    if not os.path.exists(top):
        logger.debug("Stream root %s does not exist — nothing to stream", top)
        files.close()
        return

    logger.debug("Streaming files from %s (%d filters)", top, len(filters))
    sent = 0
    try:
        for path in _walk(top):
            if passes(path, filters):
                files.send(_relative(path, top))
                sent += 1
    except OSError as e:
        raise WalkError(e.filename or top, e.strerror or str(e)) from e
    finally:
        if not files.closed:
            files.close()

    logger.debug("Streamed %d files from %s", sent, top)


def _walk(path: str) -> Iterator[str]:
    """Yield every non-directory entry below *path* in lexical order."""
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        child = entry.name if path == os.curdir else os.path.join(path, entry.name)
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(child)
        else:
            yield child


def _relative(path: str, root: str) -> str:
    """Strip the *root* prefix from a traversal path."""
    if root == os.curdir:
        return path
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path[len(prefix):]


class FileStream:
    """Run ``stream_files`` in a background producer thread.

    Iterate the stream to consume paths as they are found, then call
    ``wait()`` to join the producer and re-raise its error, if any.
    Each stream owns its channel and error and is not reusable.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        *filters: FilterPredicate,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self.root = root
        self.filters = filters
        self.channel = PathChannel(capacity)
        self.error: Exception | None = None
        self._thread = threading.Thread(
            target=self._produce,
            name=f"stream:{os.fspath(root)}",
            daemon=True,
        )

    def start(self) -> FileStream:
        self._thread.start()
        return self

    def _produce(self) -> None:
        try:
            stream_files(self.root, self.channel, *self.filters)
        except Exception as e:
            # Re-raised to the consumer by wait()
            self.error = e

    def __iter__(self) -> Iterator[str]:
        return iter(self.channel)

    def wait(self, timeout: float | None = None) -> None:
        """Join the producer; raise the walk error if it failed.

        Raises:
            TimeoutError: The producer is still walking after *timeout*.
        """
        self._thread.join(timeout)
        if self._thread.is_alive():
            raise TimeoutError(f"Stream of {os.fspath(self.root)} still running after {timeout}s")
        if self.error is not None:
            raise self.error


def collect_files(
    root: str | os.PathLike[str],
    *filters: FilterPredicate,
    capacity: int = DEFAULT_CAPACITY,
) -> list[str]:
    """Stream *root* and return all matching relative paths as a list."""
    stream = FileStream(root, *filters, capacity=capacity).start()
    paths = list(stream)
    stream.wait()
    return paths


# ═══════════════════════════════════════════════════════════════════════
#  Directories
# ═══════════════════════════════════════════════════════════════════════


def mkdir_all(*dirs: str | Path, mode: int = 0o755) -> None:
    """Create one or more directories, parents included.  Existing is fine."""
    for d in dirs:
        Path(d).mkdir(mode=mode, parents=True, exist_ok=True)


def rmdir(path: str | Path) -> None:
    """Remove a directory along with its contents.  Missing is fine."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
