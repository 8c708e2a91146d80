"""Export collaborators — read-only views of the player table."""

from courttime.export.csv_export import (
    DEFAULT_FILE_NAME,
    export_rows,
    header_row,
    to_csv,
    write_csv,
)

__all__ = ["DEFAULT_FILE_NAME", "export_rows", "header_row", "to_csv", "write_csv"]
