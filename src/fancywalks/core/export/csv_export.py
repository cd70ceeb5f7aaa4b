"""
CSV export of walk records.

Writes one row per walk with a header row of field names, and reads such a
file back into records.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import ValidationError

from fancywalks.core.errors import ExportError
from fancywalks.models.walk import WalkRecord
from fancywalks.utils.logging import timed_phase

logger = logging.getLogger(__name__)


@timed_phase("export_csv")
def export_walks_csv(walks: Iterable[WalkRecord], output_path: Union[str, Path]) -> int:
    """
    Write walks to a CSV file, replacing any existing file.

    Columns are name, description, length, latitude, longitude, distance.

    Args:
        walks: Walk records in output order
        output_path: CSV file to write

    Returns:
        Number of rows written

    Raises:
        ExportError: If the file cannot be created or written
    """
    output_path = Path(output_path)
    rows = 0

    try:
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=WalkRecord.csv_fields())
            writer.writeheader()
            for walk in walks:
                writer.writerow(walk.to_row())
                rows += 1
    except OSError as e:
        raise ExportError(
            f"Failed to write CSV: {e}", path=str(output_path), details={"rows_written": rows}
        ) from e

    logger.info(f"Exported {rows} walks to {output_path}")
    return rows


def read_walks_csv(input_path: Union[str, Path]) -> List[WalkRecord]:
    """
    Read walks from a CSV file written by export_walks_csv.

    Args:
        input_path: CSV file to read

    Returns:
        Walk records in file order

    Raises:
        ExportError: If the file is missing, has the wrong header, or a row is invalid
    """
    input_path = Path(input_path)
    fields = WalkRecord.csv_fields()

    try:
        with open(input_path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames != fields:
                raise ExportError(
                    f"Unexpected CSV header: {reader.fieldnames}",
                    path=str(input_path),
                    details={"expected": fields},
                )

            walks = []
            for line_number, row in enumerate(reader, start=2):
                try:
                    walks.append(WalkRecord.model_validate(row))
                except ValidationError as e:
                    raise ExportError(
                        f"Invalid walk on line {line_number}: {e.errors()[0].get('msg')}",
                        path=str(input_path),
                        details={"line_number": line_number},
                    ) from e
    except OSError as e:
        raise ExportError(f"Failed to read CSV: {e}", path=str(input_path)) from e

    return walks
