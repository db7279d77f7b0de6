from typing import Dict


# ============================================================================
# Statistics Tracker
# ============================================================================


class StatisticsTracker:
    """Tracks optimization statistics for one run."""

    def __init__(self):
        self.stats = {
            "total_files": 0,
            "processed": 0,
            "errors": 0,
            "total_original_size": 0,
            "total_optimized_size": 0,
            "space_saved": 0,
            "files": [],
            # Asset-level statistics
            "images_converted": 0,
            "sequences_optimized": 0,
            "assets_skipped": 0,
            "total_processing_time": 0.0,
        }

    def add_file_outcome(self, outcome: Dict) -> None:
        """
        Record the outcome of one processed file.

        Args:
            outcome: File outcome dictionary produced by the file pipeline
        """
        self.stats["files"].append(outcome)
        self.stats["total_original_size"] += outcome["original_size"]

        if outcome["status"] == "success":
            self._record_processed(outcome)
        else:
            self._record_error()

    def _record_processed(self, outcome: Dict) -> None:
        self.stats["processed"] += 1
        self.stats["total_optimized_size"] += outcome["optimized_size"]
        self.stats["space_saved"] += outcome["space_saved"]
        self.stats["images_converted"] += outcome["images_converted"]
        self.stats["sequences_optimized"] += outcome["sequences_optimized"]
        self.stats["assets_skipped"] += outcome["assets_skipped"]

    def _record_error(self) -> None:
        self.stats["errors"] += 1

    def set_total_files(self, total_files: int) -> None:
        self.stats["total_files"] = total_files

    def set_total_processing_time(self, processing_time: float) -> None:
        self.stats["total_processing_time"] = processing_time

    def get_stats(self) -> Dict:
        """Return a copy of the statistics dictionary."""
        stats = dict(self.stats)
        stats["files"] = list(self.stats["files"])
        return stats
