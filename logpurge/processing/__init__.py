"""File processing for LogPurge."""

from .batch import compute_folder_stats, run_batch
from .data_models import RunSummary
from .file_transform import persist, process_file, remove_blank_lines, transform_content
from .pipeline import run_pipeline

__all__ = [
    "RunSummary",
    "compute_folder_stats",
    "persist",
    "process_file",
    "remove_blank_lines",
    "run_batch",
    "run_pipeline",
    "transform_content",
]
