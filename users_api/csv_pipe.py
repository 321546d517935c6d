"""
CSV to JSON-lines conversion.

The first row of the CSV file is the header.  Every following row is
written as one compact JSON object per line, keyed by the header
names, with values kept as strings and trimmed of surrounding
whitespace.  Rows are streamed, so the whole file is never held in
memory.
"""

import csv
import json
import logging
from pathlib import Path
from typing import Dict, Iterator, TextIO, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def iter_rows(stream: TextIO, delimiter: str = ",") -> Iterator[Dict[str, str]]:
    """Yield each data row as a dict; blank lines are skipped."""
    reader = csv.reader(stream, delimiter=delimiter)
    header = next(reader, None)
    if header is None:
        return
    header = [name.strip() for name in header]
    for row in reader:
        row = [cell.strip() for cell in row]
        if not row or all(not cell for cell in row):
            continue
        # Short rows get empty strings; extra cells are numbered after the header.
        values = row + [""] * (len(header) - len(row))
        record = dict(zip(header, values))
        for index, extra in enumerate(values[len(header):], start=len(header) + 1):
            record[f"field{index}"] = extra
        yield record


def convert_csv_to_json_lines(source: PathLike, target: PathLike, delimiter: str = ",") -> int:
    """Convert ``source`` CSV into JSON lines written to ``target``.

    Returns the number of rows written.  ``target`` is overwritten.
    """
    count = 0
    with open(source, newline="", encoding="utf-8") as src, open(target, "w", encoding="utf-8") as dst:
        for record in iter_rows(src, delimiter=delimiter):
            dst.write(json.dumps(record, ensure_ascii=False, separators=(",", ":")))
            dst.write("\n")
            count += 1
    logger.info("Converted %s rows from %s to %s", count, source, target)
    return count
