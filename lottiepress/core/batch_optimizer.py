import time
from pathlib import Path
from typing import Dict, List

from lottiepress.core.config import OptimizerConfig, ParameterValidator
from lottiepress.core.file_pipeline import FilePipeline
from lottiepress.services.statistics import StatisticsTracker
from lottiepress.utils.file_processor import FileProcessor
from lottiepress.utils.logger import get_logger


# ============================================================================
# Batch Optimizer
# ============================================================================


class BatchOptimizer:
    """Main orchestrator: runs the file pipeline over every document in a folder."""

    document_exts = [".json"]

    def __init__(self, config: OptimizerConfig):
        """
        Initialize batch optimizer with configuration.

        Args:
            config: Optimizer configuration
        """
        self.config = config
        self.pipeline = FilePipeline(config)
        self.file_processor = FileProcessor()
        self.stats = StatisticsTracker()
        self.logger = get_logger()

    def optimize(self) -> Dict:
        """
        Execute the optimization workflow.

        Files are processed one after another; a file that fails is recorded
        and the run continues with the next one.

        Returns:
            Dictionary with optimization statistics

        Raises:
            ValueError: If the configuration is invalid
            FileNotFoundError: If the input folder does not exist
        """
        ParameterValidator.validate(self.config)

        if not self.config.input_dir.is_dir():
            raise FileNotFoundError(f"Input folder does not exist: {self.config.input_dir}")

        start_time = time.time()
        all_files = self._collect_files()

        if not all_files:
            print("No JSON files found in inputs directory.")
            return self.stats.get_stats()

        self.config.output_dir.mkdir(parents=True, exist_ok=True)
        self.stats.set_total_files(len(all_files))
        print(f"Found {len(all_files)} JSON file(s) to process:\n")

        for file_path in all_files:
            self._process_file(file_path)

        self.stats.set_total_processing_time(time.time() - start_time)
        stats = self.stats.get_stats()
        self.logger.notice(
            f"Optimized {stats['processed']}/{stats['total_files']} file(s) from {self.config.input_dir} "
            f"({stats['errors']} failed)"
        )
        return stats

    def _collect_files(self) -> List[Path]:
        """
        Collect the documents to process.

        Returns:
            Regular files in the input folder with a JSON extension, sorted by name
        """
        return sorted(
            (f for f in self.config.input_dir.iterdir() if f.suffix.lower() in self.document_exts and f.is_file()),
            key=lambda f: f.name,
        )

    def _process_file(self, file_path: Path) -> None:
        out_path = self.file_processor.determine_output_path(file_path, self.config.output_dir)
        self.logger.debug(f"Optimizing {file_path} -> {out_path}")
        outcome = self.pipeline.process(file_path, out_path)
        self.stats.add_file_outcome(outcome)
