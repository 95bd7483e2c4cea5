import pandas as pd

from record_shapes import MapShaped, StructShaped, classify

NIL = "<nil>"
UNSUPPORTED = "<unsupported>"


def format_value(value) -> str:
    # float NaN is a value, not a null
    if value is None or value is pd.NA or value is pd.NaT:
        return NIL
    return str(value)


def _column_name(col) -> str:
    return getattr(col, "name", col)


def _match_field(fields, name):
    # tag-derived names win over plain identifiers
    for f in fields:
        if f.display_name is not None and f.display_name == name:
            return f
    for f in fields:
        if f.identifier == name:
            return f
    return None


def decode_row(record, columns) -> list[str]:
    """Render one record as display cells aligned to `columns`. Never raises."""
    names = [_column_name(c) for c in columns]
    shape = classify(record)

    if isinstance(shape, MapShaped):
        row = []
        for name in names:
            if name in shape.entries:
                row.append(format_value(shape.entries[name]))
            else:
                row.append(NIL)
        return row

    if isinstance(shape, StructShaped):
        row = []
        for name in names:
            field = _match_field(shape.fields, name)
            row.append(NIL if field is None else format_value(field.value))
        return row

    return [UNSUPPORTED] * len(names)
