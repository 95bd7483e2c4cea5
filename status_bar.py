import os


def render_status(context, width):
    """
    context keys: view, file_path, total_rows, first_row, last_row,
                  cursor_row, loading_more
    """
    view = context.get('view', 'input')
    if view == 'table':
        mode = 'TABLE'
    elif view == 'file_select':
        mode = 'FILES'
    else:
        mode = 'INPUT'

    parts = [mode]
    fname = context.get('file_path') or ''
    if fname:
        parts.append(os.path.basename(fname))

    if 'total_rows' in context:
        total_rows = context.get('total_rows', 0)
        if total_rows:
            first = context.get('first_row', 0) + 1
            last = context.get('last_row', 0) + 1
            cursor = context.get('cursor_row', 0) + 1
            parts.append(f"rows {first}-{last} of {total_rows}")
            parts.append(f"row {cursor}")
        else:
            parts.append("0 rows")
        if context.get('loading_more'):
            parts.append("loading…")

    text = " " + " | ".join(parts)
    return text.ljust(width)[:width]
