"""Cucumber report aggregation.

Reads every ``<prefix>*.json`` report in a directory and folds the step
outcomes into per-scenario counts. Scenarios with the same name share one
entry, across features and across files.
"""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from awesome.errors import DecodeFailure, DirectoryUnreadable
from awesome.utils.fs import DirEntry, FileSystem, OSFileSystem

from .models import Feature, ScenarioCounts, StepStatus

logger = logging.getLogger(__name__)

REPORT_SUFFIX = ".json"

_features_adapter = TypeAdapter(list[Feature] | None)


def list_report_files(
    directory,
    prefix: str,
    fs: FileSystem | None = None,
) -> list[DirEntry]:
    """List report files in ``directory``.

    Raises:
        DirectoryUnreadable: If the directory cannot be listed.
    """
    fs = fs or OSFileSystem()
    return [
        entry
        for entry in fs.list_dir(directory)
        if not entry.is_dir
        and entry.name.startswith(prefix)
        and entry.name.endswith(REPORT_SUFFIX)
    ]


def read_features(path, fs: FileSystem | None = None) -> list[Feature]:
    """Read and decode one Cucumber JSON report.

    Raises:
        DecodeFailure: If the file cannot be read or is not a feature list.
    """
    fs = fs or OSFileSystem()
    try:
        data = fs.read_bytes(path)
    except OSError as e:
        raise DecodeFailure(path, f"read error: {e}") from e
    try:
        return _features_adapter.validate_json(data) or []
    except ValidationError as e:
        raise DecodeFailure(path, f"invalid report: {e.error_count()} error(s)") from e


def fold_features(
    features: list[Feature],
    results: dict[str, ScenarioCounts],
) -> dict[str, ScenarioCounts]:
    """Add every step of ``features`` to ``results`` in place."""
    for feature in features:
        for scenario in feature.elements:
            counts = results.setdefault(scenario.name, ScenarioCounts())
            for step in scenario.steps:
                status = StepStatus.normalize(step.result.status)
                if status is None:
                    continue
                counts.record(status, step.result.error_message)
    return results


def aggregate(
    directory,
    prefix: str,
    fs: FileSystem | None = None,
    verbose: bool = False,
) -> dict[str, ScenarioCounts]:
    """Aggregate all matching reports in ``directory``.

    Args:
        directory: Directory holding the report files.
        prefix: Required file name prefix.
        fs: Filesystem to read from. Defaults to the real disk.
        verbose: Log unreadable directories and skipped files.

    Returns:
        Mapping of scenario name to counts, in first-seen order. Empty when
        the directory is unreadable.
    """
    fs = fs or OSFileSystem()
    results: dict[str, ScenarioCounts] = {}

    try:
        files = list_report_files(directory, prefix, fs)
    except DirectoryUnreadable as e:
        if verbose:
            logger.warning(f"Error listing files: {e}")
        return results

    for entry in files:
        path = Path(directory) / entry.name
        try:
            features = read_features(path, fs)
        except DecodeFailure as e:
            if verbose:
                logger.warning(f"Skipping {entry.name}: {e.reason}")
            continue
        fold_features(features, results)
        logger.debug(f"Processed {entry.name}")

    return results
