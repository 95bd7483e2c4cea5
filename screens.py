from app_state import ViewState

QUIT_HINT = "(Press Enter to load file, Ctrl+D to quit)"
TABLE_HINT = "Press q or ESC to go back, Ctrl+D to quit"
INPUT_MARK = "{input}"


def input_screen(state):
    return ["", "  Enter path to parquet file:", "", INPUT_MARK, "", f"  {QUIT_HINT}"]


def file_select_screen(state):
    if not state.files:
        notice = str(state.notice) if state.notice else "No parquet files found in current directory."
        return [
            "",
            f"  {notice}",
            "",
            "  Enter path to parquet file:",
            "",
            INPUT_MARK,
            "",
            f"  {QUIT_HINT}",
        ]

    lines = ["", "  Select a parquet file to view:", ""]
    for i, name in enumerate(state.files):
        marker = ">" if i == state.selected_file else " "
        lines.append(f"  {marker} {name}")
    lines += ["", "  (Press Enter to select, Ctrl+D to quit)"]
    return lines


def table_message(state):
    """Text shown in place of the table, or None when the table itself is drawn."""
    if state.is_loading:
        return ["Loading parquet data..."]
    if state.error is not None:
        return [f"Error: {state.error}", "", TABLE_HINT]
    if not state.columns:
        return ["No data found in parquet file.", "", TABLE_HINT]
    return None


def screen_lines(state):
    if state.view is ViewState.INPUT:
        return input_screen(state)
    if state.view is ViewState.FILE_SELECT:
        return file_select_screen(state)
    return table_message(state)
