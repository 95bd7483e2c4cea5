import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

# metadata key holding the parquet-style tag on dataclass fields,
# e.g. field(metadata={"parquet": "name=age, type=INT32"})
TAG_KEY = "parquet"


@dataclass(frozen=True)
class StructField:
    identifier: str
    display_name: Optional[str]
    value: Any = None

    @property
    def label(self) -> str:
        return self.display_name or self.identifier


@dataclass(frozen=True)
class MapShaped:
    entries: dict


@dataclass(frozen=True)
class StructShaped:
    fields: tuple


@dataclass(frozen=True)
class OtherShaped:
    value: Any


def parse_tag_name(tag) -> Optional[str]:
    """Return the `name=` part of a tag string like "name=age, type=INT32"."""
    if not isinstance(tag, str) or not tag:
        return None
    for part in tag.split(","):
        part = part.strip()
        if part.startswith("name="):
            name = part[len("name="):].strip()
            return name or None
    return None


def _field_tag(field) -> Optional[str]:
    metadata = getattr(field, "metadata", None) or {}
    tag = metadata.get(TAG_KEY)
    return tag if isinstance(tag, str) else None


def declared_fields(record_type) -> list[StructField]:
    """Fields of a dataclass or namedtuple type, without values, in declaration order."""
    if dataclasses.is_dataclass(record_type):
        return [
            StructField(f.name, parse_tag_name(_field_tag(f)))
            for f in dataclasses.fields(record_type)
        ]
    names = getattr(record_type, "_fields", None)
    if isinstance(names, tuple):
        return [StructField(str(n), None) for n in names]
    return []


def _is_struct(record) -> bool:
    if isinstance(record, type):
        return False
    if dataclasses.is_dataclass(record):
        return True
    return isinstance(record, tuple) and isinstance(getattr(record, "_fields", None), tuple)


def classify(record):
    """Sort a record into exactly one of MapShaped, StructShaped or OtherShaped."""
    if isinstance(record, Mapping):
        return MapShaped({str(k): v for k, v in record.items()})
    if _is_struct(record):
        fields = tuple(
            StructField(f.identifier, f.display_name, getattr(record, f.identifier, None))
            for f in declared_fields(type(record))
        )
        return StructShaped(fields)
    return OtherShaped(record)
