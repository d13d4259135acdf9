"""File system helpers for reading subtitle input and writing ASS output."""

from pathlib import Path


class FSUtil:
    """Utility class for file system operations."""

    @staticmethod
    def read_binary_file(file_path: Path) -> bytes:
        """Read a file's raw bytes.

        Args:
            file_path: Path to the file.

        Returns:
            File contents.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the path is not a file.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if not file_path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        return file_path.read_bytes()

    @staticmethod
    def write_text_file(file_path: Path, content: str, create_parents: bool) -> None:
        """Write UTF-8 encoded text file.

        Args:
            file_path: Path where the file should be written.
            content: Content to write to the file.
            create_parents: If True, create parent directories if they don't exist.

        Raises:
            OSError: If the file cannot be written.
        """
        if create_parents:
            file_path.parent.mkdir(parents=True, exist_ok=True)

        # newline="" keeps the document's LF line endings on every platform
        with open(file_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
