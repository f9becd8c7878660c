from __future__ import annotations

import csv
import io
from typing import Mapping, Sequence


def serialize_rows(rows: Sequence[Mapping[str, object]], *, include_header: bool = False) -> str:
    """Write rows as CSV text, values in each row's key order.

    Fields containing commas, quotes or newlines are quoted by the csv
    module, so callers pass raw values.
    """

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    if include_header and rows:
        writer.writerow(list(rows[0].keys()))
    for row in rows:
        writer.writerow(list(row.values()))
    # No trailing newline after the last row.
    return out.getvalue().rstrip("\n")


def to_csv_bytes(rows: Sequence[Mapping[str, object]], *, include_header: bool = False) -> bytes:
    return serialize_rows(rows, include_header=include_header).encode("utf-8")
