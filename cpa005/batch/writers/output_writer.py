"""
Output writer for converted CPA-005 files.

Writes each converted file next to its siblings in an output directory,
named after the input file's stem.
"""

from pathlib import Path

from cpa005.observability.logger import get_logger

logger = get_logger(__name__)


class OutputWriter:
    """
    Writes converted file text to ``<output_dir>/<input stem><extension>``.
    """

    def __init__(self, output_dir: str | Path, extension: str = ".txt"):
        """
        Initialize output writer.

        Args:
            output_dir: Existing directory that receives the files
            extension: Extension for written files, including the dot
        """
        self.output_dir = Path(output_dir)
        self.extension = extension

        if not self.output_dir.is_dir():
            raise NotADirectoryError(f"Output directory not found: {output_dir}")

    def target_path(self, source_path: str | Path) -> Path:
        return self.output_dir / f"{Path(source_path).stem}{self.extension}"

    def write(self, source_path: str | Path, text: str) -> Path:
        """
        Write ``text`` for the given input file.

        Returns:
            Path of the written file
        """
        target = self.target_path(source_path)
        # newline="" keeps LF line endings on every platform
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(text)

        logger.info("Wrote CPA-005 file", extra={"path": str(target), "bytes": len(text)})
        return target
