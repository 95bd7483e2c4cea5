import logging
from dataclasses import dataclass

from errors import SchemaUndetermined
from record_shapes import MapShaped, OtherShaped, StructShaped, classify

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_WIDTH = 20


@dataclass(frozen=True)
class Column:
    name: str
    width: int = DEFAULT_COLUMN_WIDTH


def extract_column_names(record) -> list[str]:
    """Column names derived from one sample record.

    Mapping keys keep their insertion order; struct fields keep declaration
    order and prefer the `name=` tag over the field identifier.
    """
    shape = classify(record)
    if isinstance(shape, MapShaped):
        names = list(shape.entries.keys())
    elif isinstance(shape, StructShaped):
        names = [f.label for f in shape.fields]
    elif isinstance(shape, OtherShaped):
        raise SchemaUndetermined(f"unsupported record type {type(record).__name__}")
    else:
        raise SchemaUndetermined(f"unknown record shape {shape!r}")

    if not names:
        raise SchemaUndetermined("sample record has no fields")
    return names


def extract_columns(record, width: int = DEFAULT_COLUMN_WIDTH) -> list[Column]:
    columns = [Column(name, width) for name in extract_column_names(record)]
    logger.debug("derived %d columns: %s", len(columns), [c.name for c in columns])
    return columns
