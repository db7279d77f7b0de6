"""
Tests for the lottiepress command line interface.
"""

import logging.handlers
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from lottiepress.cli import build_parser, main
from lottiepress.utils.logger import get_logger


@pytest.mark.unit
class TestArgumentParser:
    """Tests for build_parser."""

    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.input_dir == Path("inputs")
        assert args.output_dir == Path("outputs")
        assert args.max_workers == 4
        assert args.precision == 3
        assert args.log_level == "INFO"
        assert args.no_log_file is False
        assert args.log_rotate is False
        assert args.log_max_bytes == 10485760
        assert args.log_backup_count == 5

    def test_custom_values(self):
        args = build_parser().parse_args(
            ["in", "out", "--max-workers", "2", "--precision", "2", "--log-level", "DEBUG", "--no-log-file"]
        )

        assert args.input_dir == Path("in")
        assert args.output_dir == Path("out")
        assert args.max_workers == 2
        assert args.precision == 2
        assert args.log_level == "DEBUG"
        assert args.no_log_file is True

    def test_invalid_log_level(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "LOUD"])


@pytest.mark.unit
class TestMain:
    """Tests for main()."""

    @patch("lottiepress.cli.BatchOptimizer")
    def test_main_runs_optimizer_with_config(self, mock_optimizer_class, temp_dir, capsys):
        mock_optimizer = MagicMock()
        mock_optimizer.optimize.return_value = {
            "processed": 2,
            "errors": 0,
            "images_converted": 3,
            "sequences_optimized": 1,
            "assets_skipped": 2,
            "total_original_size": 4096,
            "total_optimized_size": 1024,
            "space_saved": 3072,
        }
        mock_optimizer_class.return_value = mock_optimizer

        exit_code = main([str(temp_dir / "in"), str(temp_dir / "out"), "--max-workers", "3", "--no-log-file"])

        assert exit_code == 0
        config = mock_optimizer_class.call_args[0][0]
        assert config.input_dir == temp_dir / "in"
        assert config.output_dir == temp_dir / "out"
        assert config.max_workers == 3
        output = capsys.readouterr().out
        assert "Optimization Summary" in output
        assert "Images converted: 3" in output
        assert "Space saved: 3.00 KB" in output

    def test_main_missing_input_folder(self, temp_dir):
        exit_code = main([str(temp_dir / "missing"), str(temp_dir / "out"), "--no-log-file"])

        assert exit_code == 1

    def test_main_invalid_config(self, temp_dir, capsys):
        exit_code = main([str(temp_dir), str(temp_dir), "--no-log-file"])

        assert exit_code == 1
        assert "output_dir cannot be the same as input_dir" in capsys.readouterr().err

    def test_main_invalid_workers(self, temp_dir, capsys):
        exit_code = main([str(temp_dir), str(temp_dir / "out"), "--max-workers", "0", "--no-log-file"])

        assert exit_code == 1
        assert "max_workers must be at least 1" in capsys.readouterr().err

    def test_main_writes_log_file(self, temp_dir):
        (temp_dir / "in").mkdir()
        log_dir = temp_dir / "logs"

        exit_code = main([str(temp_dir / "in"), str(temp_dir / "out"), "--log-dir", str(log_dir)])

        assert exit_code == 0
        assert log_dir.is_dir()

    def test_main_rotating_log_file(self, temp_dir):
        (temp_dir / "in").mkdir()
        log_dir = temp_dir / "logs"

        exit_code = main(
            [
                str(temp_dir / "in"),
                str(temp_dir / "out"),
                "--log-dir",
                str(log_dir),
                "--log-rotate",
                "--log-max-bytes",
                "2048",
                "--log-backup-count",
                "2",
            ]
        )

        handler = get_logger()._file_handler
        assert exit_code == 0
        assert isinstance(handler, logging.handlers.RotatingFileHandler)
        assert handler.maxBytes == 2048
        assert handler.backupCount == 2
