"""The orchestration engine: file resolution, analysis and formatting runs."""

from gitai.pipeline.analysis import run_analysis
from gitai.pipeline.executor import analyze, fmt
from gitai.pipeline.formatting import run_format
from gitai.pipeline.resolver import resolve

__all__ = [
    "analyze",
    "fmt",
    "resolve",
    "run_analysis",
    "run_format",
]
