import logging
import os

logger = logging.getLogger(__name__)


def find_candidate_files(directory=None, suffix=".parquet") -> list[str]:
    """Names of regular files in `directory` ending with `suffix`, sorted.

    Any enumeration failure yields an empty list.
    """
    try:
        directory = directory or os.getcwd()
        entries = list(os.scandir(directory))
    except OSError as exc:
        logger.warning("cannot list %s: %s", directory, exc)
        return []

    files = []
    for entry in entries:
        try:
            if entry.is_file() and entry.name.endswith(suffix):
                files.append(entry.name)
        except OSError:
            continue
    files.sort()
    return files
