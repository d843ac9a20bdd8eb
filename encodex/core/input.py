"""
Input collection.

An InputSource gathers the byte buffers that are handed to translation
units, one buffer per file or literal string. File names are resolved
against an explicit working directory.
"""
import errno
import sys
from collections import deque
from pathlib import Path
from typing import BinaryIO, Deque, Iterator, Optional, Union

from .exceptions import InputReadError
from .logging import get_logger

logger = get_logger(__name__)

STDIN_NAME = '-'


class InputSource:
    """
    Ordered collection of input buffers.

    Buffers are handed out in the order they were added. Standard input
    can be read once.

    Example:
        >>> source = InputSource(Path("/tmp"))
        >>> source.add_literal("foo")
        >>> source.next_buffer()
        b'foo'
    """

    def __init__(
        self,
        working_dir: Union[str, Path],
        stdin: Optional[BinaryIO] = None
    ):
        """
        Initialize input source.

        Args:
            working_dir: Directory relative file names are resolved against
            stdin: Binary stream used for the '-' file name
        """
        self.working_dir = Path(working_dir)
        self._stdin = stdin
        self._stdin_read = False
        self._buffers: Deque[bytes] = deque()

    def resolve(self, name: Union[str, Path]) -> Path:
        """Resolve a file name against the working directory."""
        path = Path(name).expanduser()
        if path.is_absolute():
            return path
        return self.working_dir / path

    def add_file(self, name: Union[str, Path]) -> None:
        """
        Read a file and add its contents.

        Args:
            name: File name, relative to working_dir, or '-' for stdin

        Raises:
            InputReadError: If the file can't be read, or stdin was
                already consumed
        """
        if str(name) == STDIN_NAME:
            self._add_stdin()
            return

        path = self.resolve(name)
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise self._read_error(path, 'not found', e) from e
        except PermissionError as e:
            raise self._read_error(path, 'permission denied', e) from e
        except IsADirectoryError as e:
            raise self._read_error(path, 'is a directory', e) from e
        except OSError as e:
            raise self._read_error(path, e.strerror or 'read failed', e) from e

        logger.debug("Read %d bytes from %s", len(data), path)
        self._buffers.append(data)

    def add_stream(self, stream: BinaryIO) -> None:
        """Read a binary stream to the end and add its contents."""
        data = stream.read()
        logger.debug("Read %d bytes from stream", len(data))
        self._buffers.append(data)

    def add_literal(self, text: str) -> None:
        """Add a literal string as UTF-8 bytes."""
        self._buffers.append(text.encode('utf-8'))

    def next_buffer(self) -> Optional[bytes]:
        """Remove and return the oldest buffer, or None when empty."""
        if not self._buffers:
            return None
        return self._buffers.popleft()

    def __iter__(self) -> Iterator[bytes]:
        while self._buffers:
            yield self._buffers.popleft()

    def __len__(self) -> int:
        return len(self._buffers)

    def _add_stdin(self) -> None:
        if self._stdin_read:
            logger.warning("Standard input was already read")
            raise InputReadError(
                "Could not read standard input: already read!",
                path=STDIN_NAME,
                reason='already read'
            )
        self._stdin_read = True
        self.add_stream(self._stdin if self._stdin is not None else sys.stdin.buffer)

    @staticmethod
    def _read_error(path: Path, reason: str, cause: OSError) -> InputReadError:
        logger.warning("Could not open file '%s': %s", path, reason)
        return InputReadError(
            f"Could not open file '{path}': {reason}!",
            path=str(path),
            reason=reason,
            error_code=cause.errno or errno.EIO
        )
