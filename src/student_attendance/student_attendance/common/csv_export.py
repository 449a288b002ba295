from __future__ import annotations

import csv
import io
from typing import Any, Mapping, Sequence

from flask import Response, send_file

from ..core.exceptions import ValidationError


def to_csv_text(records: Sequence[Mapping[str, Any]]) -> str:
    """Serialize flat records to CSV text.

    The header comes from the first record's keys. Values containing commas,
    quotes or line breaks are quoted by the csv module.
    """

    if not records:
        raise ValidationError("No data to export")

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(records[0].keys()), extrasaction="ignore", lineterminator="\r\n")
    writer.writeheader()
    for row in records:
        writer.writerow({k: ("" if v is None else v) for k, v in row.items()})
    return out.getvalue()


def csv_response(records: Sequence[Mapping[str, Any]], *, filename: str) -> Response:
    """Attachment download; werkzeug quotes the filename and adds `filename*` for non-ASCII names."""

    csv_bytes = to_csv_text(records).encode("utf-8-sig")
    return send_file(io.BytesIO(csv_bytes), mimetype="text/csv", as_attachment=True, download_name=filename)
