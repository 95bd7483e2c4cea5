class ViewerError(Exception):
    """Base class for every failure the viewer reports to the user."""


class DataSourceError(ViewerError):
    pass


class OpenFailed(DataSourceError):
    def __init__(self, path, cause=None):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to open parquet file: {cause}")


class EndOfData(ViewerError):
    def __init__(self, message="no more rows to read"):
        super().__init__(message)


class SchemaUndetermined(ViewerError):
    def __init__(self, reason=None):
        self.reason = reason
        msg = "could not determine columns from parquet file"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class InitialReadFailed(ViewerError):
    def __init__(self, row_index: int, cause=None):
        self.row_index = row_index
        self.cause = cause
        super().__init__(f"failed to read row {row_index}: {cause}")


class AdvanceFailed(ViewerError):
    def __init__(self, cause=None):
        self.cause = cause
        super().__init__(f"failed to read row: {cause}")


class NoFilesFound(ViewerError):
    def __init__(self, directory=None, suffix=".parquet"):
        self.directory = directory
        self.suffix = suffix
        kind = suffix.lstrip(".") or "matching"
        super().__init__(f"No {kind} files found in current directory.")
