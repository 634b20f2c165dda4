"""Cucumber report aggregation and output sinks."""

from .aggregator import aggregate, fold_features, list_report_files, read_features
from .models import Feature, ScenarioCounts, StepStatus
from .sinks import emit_all, load_aggregated_results, print_console, write_html, write_json

__all__ = [
    "Feature",
    "ScenarioCounts",
    "StepStatus",
    "aggregate",
    "emit_all",
    "fold_features",
    "list_report_files",
    "load_aggregated_results",
    "print_console",
    "read_features",
    "write_html",
    "write_json",
]
