"""Read body weight and BPM history from a JSON backup file."""

import json
from pathlib import Path

import structlog
from pydantic import ValidationError

from workout_progress.core.exceptions import BackupFormatError
from workout_progress.models.metrics import MetricSample
from workout_progress.schemas.entries import BackupFile
from workout_progress.transformers import BodyWeightTransformer, BpmTransformer

logger = structlog.get_logger()

# Maximum accepted backup size in bytes (10 MB)
MAX_BACKUP_FILE_SIZE = 10 * 1024 * 1024


def parse_backup(raw: str | bytes, source: str | None = None) -> BackupFile:
    """Validate backup JSON text.

    Raises:
        BackupFormatError: If the text is not JSON or entries fail validation
    """
    try:
        return BackupFile.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise BackupFormatError(f"Invalid JSON: {e.msg} (line {e.lineno})", source) from e
    except ValidationError as e:
        raise BackupFormatError(
            f"{e.error_count()} invalid field(s): {e.errors()[0]['msg']}", source
        ) from e


def load_backup(path: Path) -> BackupFile:
    """Load and validate a backup file from disk.

    Args:
        path: Path to the exported JSON backup

    Returns:
        Validated backup with body weight and BPM entries

    Raises:
        BackupFormatError: If the file is missing, too large or malformed
    """
    source = str(path)
    try:
        size = path.stat().st_size
    except OSError as e:
        raise BackupFormatError(f"Cannot read file: {e.strerror}", source) from e

    if size > MAX_BACKUP_FILE_SIZE:
        raise BackupFormatError(f"File is larger than {MAX_BACKUP_FILE_SIZE} bytes", source)

    backup = parse_backup(path.read_bytes(), source)
    logger.info(
        "Backup loaded",
        path=source,
        schema_version=backup.schema_version,
        body_weights=len(backup.body_weights),
        bpm_entries=len(backup.bpm_entries),
    )
    return backup


def weight_samples(backup: BackupFile) -> list[MetricSample]:
    """Body weight samples (grams) from a backup."""
    return BodyWeightTransformer.transform_all(backup.body_weights)


def bpm_samples(backup: BackupFile) -> list[MetricSample]:
    """BPM samples from a backup."""
    return BpmTransformer.transform_all(backup.bpm_entries)
