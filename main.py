import curses
import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

from _version import __version__
from app_state import AppState
from config_paths import LOG_PATH, ensure_config_dirs, load_config
from log_setup import configure_logging
from orchestrator import Orchestrator

logger = logging.getLogger(__name__)

USAGE = (
    "pqview - terminal parquet browser\n\n"
    "Usage:\n"
    "  pqview [path]\n"
    "  pqview --sample [path] [rows]\n"
    "  pqview -v\n"
)


def _parse_sample_args(args):
    """Return (path, rows) for `--sample [path] [rows]`."""
    rest = args[args.index("--sample") + 1 :]
    path = "sample.parquet"
    rows = 10
    if rest:
        path = rest[0]
    if len(rest) > 1:
        rows = int(rest[1])
        if rows < 0:
            raise ValueError("row count must not be negative")
    return path, rows


def _run_sample(args):
    from sample_generator import generate_sample_parquet

    try:
        path, rows = _parse_sample_args(args)
    except ValueError as exc:
        print(f"Invalid row count: {exc}", file=sys.stderr)
        return 2
    try:
        generate_sample_parquet(path, rows)
    except OSError as exc:
        print(f"Error generating sample parquet file: {exc}", file=sys.stderr)
        return 1
    print(f"Sample parquet file '{path}' generated successfully")
    print(f"Run the viewer with: pqview {path}")
    return 0


def build_state(args, cfg):
    path = args[0] if len(args) == 1 else None
    return AppState(
        file_path=path,
        window_size=cfg["WINDOW_SIZE"],
        column_width=cfg["COLUMN_WIDTH"],
        table_height=cfg["TABLE_HEIGHT"],
        file_suffix=cfg["FILE_SUFFIX"],
        batch_size=cfg["BATCH_SIZE"],
    )


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args or "--help" in args:
        print(USAGE)
        return

    if "--sample" in args:
        sys.exit(_run_sample(args))

    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    ensure_config_dirs()
    cfg = load_config()
    configure_logging(cfg["LOG_LEVEL"], LOG_PATH)

    state = build_state(args, cfg)

    def curses_main(stdscr):
        Orchestrator(stdscr, state).run()

    try:
        curses.wrapper(curses_main)
    except curses.error as exc:
        logger.critical("Error running program: %s", exc)
        print(f"Error running program: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        state.shutdown()


if __name__ == "__main__":
    main()
