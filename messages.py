from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class FilesFound:
    files: list = field(default_factory=list)
    directory: Optional[str] = None


@dataclass
class TableLoaded:
    session: int
    path: str
    columns: list = field(default_factory=list)
    window: Any = None
    error: Optional[Exception] = None


@dataclass
class RowFetched:
    session: int
    row: Optional[list] = None
    error: Optional[Exception] = None


@dataclass
class TaskFailed:
    session: Optional[int]
    error: Exception
