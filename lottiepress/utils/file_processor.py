import json
from pathlib import Path
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON (constant {name} is not allowed)")


# ============================================================================
# File Processor
# ============================================================================


class FileProcessor:
    """Handles reading source documents and writing optimized output files."""

    @staticmethod
    def determine_output_path(source_file: Path, output_folder: Path) -> Path:
        """
        Determine the output path for a source file.

        The output keeps the source file name and lives directly in the
        output folder.
        """
        return output_folder / source_file.name

    @staticmethod
    def read_document(source_file: Path) -> Any:
        """
        Read and parse a JSON document.

        Raises:
            ValueError: If the text is not valid JSON, including the NaN and
                Infinity literals the json module would otherwise accept
        """
        with open(source_file, "r", encoding="utf-8") as f:
            return json.load(f, parse_constant=_reject_constant)

    @staticmethod
    def temp_path_for(out_path: Path) -> Path:
        return out_path.parent / (out_path.stem + "_tmp" + out_path.suffix)

    @staticmethod
    def write_minified(document: Any, out_path: Path) -> int:
        """
        Serialize a document without extraneous whitespace and write it.

        The text goes to a temporary sibling file first and replaces the
        destination only once fully written.

        Returns:
            Size of the written file in bytes
        """
        text = json.dumps(document, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        temp_path = FileProcessor.temp_path_for(out_path)
        try:
            temp_path.write_text(text, encoding="utf-8")
            temp_path.replace(out_path)
        finally:
            if temp_path.exists():
                temp_path.unlink()
        return out_path.stat().st_size
