from .downloader import DEFAULT_TABLES, download_database, download_table, write_table
from .table_store import LookupIndex, RecordNotFoundError, Table, TableStore

__all__ = [
    "DEFAULT_TABLES",
    "download_database",
    "download_table",
    "write_table",
    "LookupIndex",
    "RecordNotFoundError",
    "Table",
    "TableStore",
]
