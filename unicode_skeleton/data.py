import logging
import os
import threading
from pathlib import Path

from .patterns import (
    BYTE_ORDER_MARK,
    COMMENT_MARKER,
    CONFUSABLE_LINE,
    CONFUSABLES_FILENAME,
    ENV_CONFUSABLES_PATH,
)
from .table import ConfusablesTable, TableBuildError

_LOGGER = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def get_confusables_path():
    override = os.environ.get(ENV_CONFUSABLES_PATH, "").strip()
    if override:
        return Path(override)
    return DATA_DIR / CONFUSABLES_FILENAME


def parse_confusables(lines):
    """
    Parse lines of a Unicode confusables.txt file.

    Returns (source, [target, ...]) codepoint pairs sorted by source.
    Raises TableBuildError on malformed lines and duplicate sources.
    """
    mappings = {}

    for lineno, line in enumerate(lines, 1):
        if lineno == 1:
            line = line.lstrip(BYTE_ORDER_MARK)
        line = line.split(COMMENT_MARKER, 1)[0].strip()
        if not line:
            continue

        match = CONFUSABLE_LINE.fullmatch(line)
        if not match:
            raise TableBuildError(f"Line {lineno}: cannot parse {line!r}")

        source = int(match.group("source"), 16)
        targets = [int(t, 16) for t in match.group("targets").split()]

        if source in mappings:
            raise TableBuildError(f"Line {lineno}: duplicate source codepoint U+{source:04X}")
        mappings[source] = targets

    return sorted(mappings.items())


def load_confusables(path=None):
    path = Path(path) if path is not None else get_confusables_path()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as err:
        raise TableBuildError(f"Cannot read confusables data {path}: {err}") from err

    try:
        table = ConfusablesTable(parse_confusables(text.splitlines()))
    except TableBuildError:
        _LOGGER.error("Invalid confusables data in %s", path)
        raise

    _LOGGER.debug("Loaded %d confusables (%d prototype chars) from %s", len(table), table.pool_size, path)
    return table


_table = None
_table_lock = threading.Lock()


def get_table():
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                _table = load_confusables()
    return _table


def reset_table():
    global _table
    with _table_lock:
        _table = None
