"""
Tests for lottiepress.utils.file_processor module.
"""

import json
from pathlib import Path

import pytest

from lottiepress.utils.file_processor import FileProcessor


@pytest.mark.unit
class TestFileProcessor:
    """Tests for FileProcessor class."""

    def test_determine_output_path_keeps_name(self, temp_dir):
        out_path = FileProcessor.determine_output_path(temp_dir / "inputs" / "anim.json", temp_dir / "outputs")

        assert out_path == temp_dir / "outputs" / "anim.json"

    def test_temp_path_for(self):
        assert FileProcessor.temp_path_for(Path("out/anim.json")) == Path("out/anim_tmp.json")

    def test_read_document(self, temp_dir):
        source = temp_dir / "anim.json"
        source.write_text('{"v": "5.7.4", "nm": "Ä"}', encoding="utf-8")

        assert FileProcessor.read_document(source) == {"v": "5.7.4", "nm": "Ä"}

    def test_read_document_invalid_json(self, temp_dir):
        source = temp_dir / "anim.json"
        source.write_text("{", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            FileProcessor.read_document(source)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_read_document_rejects_non_finite_literals(self, temp_dir, literal):
        source = temp_dir / "anim.json"
        source.write_text(f'{{"v": "5.7.4", "fr": {literal}}}', encoding="utf-8")

        with pytest.raises(ValueError, match=f"constant {literal} is not allowed"):
            FileProcessor.read_document(source)

    def test_write_minified(self, temp_dir):
        out_path = temp_dir / "anim.json"

        size = FileProcessor.write_minified({"v": "5.7.4", "layers": [1, 2], "nm": "é"}, out_path)

        text = out_path.read_text(encoding="utf-8")
        assert text == '{"v":"5.7.4","layers":[1,2],"nm":"é"}'
        assert size == len(text.encode("utf-8"))
        assert not FileProcessor.temp_path_for(out_path).exists()

    def test_write_minified_replaces_existing(self, temp_dir):
        out_path = temp_dir / "anim.json"
        out_path.write_text("old content", encoding="utf-8")

        FileProcessor.write_minified({"v": 1}, out_path)

        assert out_path.read_text(encoding="utf-8") == '{"v":1}'

    def test_write_minified_failure_leaves_no_files(self, temp_dir):
        out_path = temp_dir / "anim.json"

        with pytest.raises(TypeError):
            FileProcessor.write_minified({"v": object()}, out_path)

        assert not out_path.exists()
        assert not FileProcessor.temp_path_for(out_path).exists()

    def test_write_minified_rejects_non_finite_numbers(self, temp_dir):
        out_path = temp_dir / "anim.json"

        with pytest.raises(ValueError):
            FileProcessor.write_minified({"fr": float("nan")}, out_path)

        assert not out_path.exists()
        assert not FileProcessor.temp_path_for(out_path).exists()
