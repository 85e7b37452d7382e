from core.export.csv_export import CSV_HEADER, default_export_filename, export_statistics_csv
from core.export.formatting import (
    WorldDisplayRow,
    format_bytes,
    format_duration,
    format_optional_duration,
    world_display_rows,
)
from core.export.report import render_detailed_report

__all__ = [
    "CSV_HEADER",
    "WorldDisplayRow",
    "default_export_filename",
    "export_statistics_csv",
    "format_bytes",
    "format_duration",
    "format_optional_duration",
    "render_detailed_report",
    "world_display_rows",
]
