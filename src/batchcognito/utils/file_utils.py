"""File and stream utilities: CSV output sinks and e-mail list reading."""

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import TextIO

from batchcognito.core.exceptions import FileOperationError


class FileSink:
    """CSV sink backed by a file that it creates and owns.

    The file is truncated if it already exists, so repeated runs against
    the same path overwrite rather than append.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Create (or truncate) the destination file.

        Args:
            path: Destination file path

        Raises:
            FileOperationError: If the file cannot be created
        """
        self.path = Path(path)
        try:
            self._handle: TextIO = open(self.path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise FileOperationError(
                "Cannot create output file",
                file_path=str(self.path),
                operation="open",
                details=str(e),
            ) from e

    @property
    def name(self) -> str:
        return str(self.path)

    def write(self, text: str) -> None:
        try:
            self._handle.write(text)
        except (OSError, ValueError) as e:
            raise FileOperationError(
                "Failed to write to output file",
                file_path=str(self.path),
                operation="write",
                details=str(e),
            ) from e

    def flush(self) -> None:
        try:
            self._handle.flush()
        except (OSError, ValueError) as e:
            raise FileOperationError(
                "Failed to flush output file",
                file_path=str(self.path),
                operation="flush",
                details=str(e),
            ) from e

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()


class StdoutSink:
    """CSV sink writing to the process's standard output.

    The stream is looked up on each call and never closed.
    """

    name = "<stdout>"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except (OSError, ValueError) as e:
            raise FileOperationError(
                "Failed to write to standard output",
                file_path=self.name,
                operation="write",
                details=str(e),
            ) from e

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise FileOperationError(
                "Failed to flush standard output",
                file_path=self.name,
                operation="flush",
                details=str(e),
            ) from e

    def close(self) -> None:
        """Leave standard output open."""


def open_sink(output_file: str | os.PathLike[str] | None) -> FileSink | StdoutSink:
    """Select the sink for a run.

    Args:
        output_file: Destination path, or None for standard output

    Returns:
        The file-backed sink when a path is given, else the stdout sink

    Raises:
        FileOperationError: If the destination file cannot be created
    """
    if output_file is None:
        return StdoutSink()
    return FileSink(output_file)


def read_emails_generator(file_path: str | os.PathLike[str]) -> Generator[str, None, None]:
    """Yield e-mail addresses from a file, one per line.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        file_path: Path to the e-mails file

    Yields:
        str: Stripped e-mail address

    Raises:
        FileOperationError: If the file cannot be read
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            for line in f:
                email = line.strip()
                if email and not email.startswith("#"):
                    yield email
    except FileNotFoundError as e:
        raise FileOperationError(
            "E-mails file not found",
            file_path=str(file_path),
            operation="read",
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(
            "Failed to read e-mails file",
            file_path=str(file_path),
            operation="read",
            details=str(e),
        ) from e
