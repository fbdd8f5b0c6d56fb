"""File writer"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, TextIO, Union

from easy_logger.core.naming import derive_file_name
from easy_logger.writers.base_writer import BaseWriter

if TYPE_CHECKING:
    from easy_logger.core.logger import Logger


class FileWriter(BaseWriter):
    """
    Write logs to a new file.

    The file is created when the first logger starts this writer and must
    not exist yet. Other processes may read it while it is open. Loggers
    sharing this instance later reuse the open file.
    """

    def __init__(
        self,
        path: Union[str, Path],
        id: Optional[str] = None,
        encoding: str = "utf-8"
    ):
        """
        Initialize file writer.

        Args:
            path: Either a file path (has a suffix, e.g. ``logs/app.log``)
                or a directory. For a directory the file name is generated
                from the logger's start time when the log is started.
            id: Log id appended to a generated file name. When given,
                ``path`` is always treated as a directory.
            encoding: File encoding (default: 'utf-8')
        """
        super().__init__()
        path = Path(path)
        if id is None and path.suffix:
            self.directory = path.parent
            self.filename: Optional[str] = path.name
        else:
            self.directory = path
            self.filename = None

        self.id = id
        self.encoding = encoding
        self.filepath: Optional[Path] = None
        self._file: Optional[TextIO] = None

    def _open(self, logger: "Logger"):
        """
        Create the log file, refusing to overwrite.

        Raises:
            FileExistsError: If the target file already exists
        """
        name = self.filename
        if name is None:
            config = logger.config
            name = derive_file_name(config.start_time, config.use_unix_time, self.id)

        filepath = self.directory / name
        filepath.parent.mkdir(parents=True, exist_ok=True)
        if filepath.exists():
            raise FileExistsError(f"Log file '{filepath}' already exists.")
        self._file = open(filepath, "x", encoding=self.encoding)
        self.filepath = filepath

    def _write(self, line: str) -> bool:
        if self._file is None:
            return False
        self._file.write(line + "\n")
        return True

    def _flush(self):
        if self._file:
            self._file.flush()

    def _release(self):
        if self._file:
            self._file.close()
            self._file = None

    def __repr__(self) -> str:
        """String representation."""
        target = self.filepath or self.directory / (self.filename or "<generated>")
        return f"FileWriter('{target}')"
