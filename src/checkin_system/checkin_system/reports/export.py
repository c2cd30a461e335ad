from __future__ import annotations

import csv
import io
from typing import Iterable

import pandas as pd

from ..checkins.model import CheckinRecord

COLUMNS = ["Name", "Device ID", "Latitude", "Longitude", "Date", "Time", "IP"]


class CheckinExporter:
    """Turns the check-in list into CSV/XLSX downloads and report attachments."""

    def rows(self, records: Iterable[CheckinRecord]) -> list[dict]:
        return [
            {
                "Name": r.name,
                "Device ID": r.device_id,
                "Latitude": r.latitude,
                "Longitude": r.longitude,
                "Date": r.date,
                "Time": r.time,
                "IP": r.ip or "",
            }
            for r in records
        ]

    def to_csv_bytes(self, records: Iterable[CheckinRecord]) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=COLUMNS)
        writer.writeheader()
        for row in self.rows(records):
            writer.writerow(row)

        # BOM so Excel opens it as UTF-8.
        return out.getvalue().encode("utf-8-sig")

    def to_xlsx_bytes(self, records: Iterable[CheckinRecord], *, sheet_name: str = "Checkins") -> bytes:
        df = pd.DataFrame(self.rows(records), columns=COLUMNS)

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=sheet_name)
        return output.getvalue()
