"""
jdiff.formats — Reading and writing JSON documents.

    read_document(path)          file → document (JSON null / bool / ...)
    parse_document(text)         str  → document
    dump_document(node)          document (or ABSENT) → pretty JSON text
    write_document(path, node)   dump_document + write
    output_paths(prefix, sfx)    prefix → {"eq": P_eq.json, ...}

Every failure at this boundary is raised as a JdiffError subclass so the
CLI can report it in one place.  Nothing here retries.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .core import ABSENT

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ═══════════════════════════════════════════════════════════════════
#  ERRORS
# ═══════════════════════════════════════════════════════════════════

class JdiffError(Exception):
    """Base class for I/O-boundary failures.  `path` names the file involved."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        super().__init__(message)
        self.path = path


class DocumentReadError(JdiffError):
    """An input file could not be opened or read."""


class DocumentParseError(JdiffError):
    """An input file is not valid JSON."""


class OutputWriteError(JdiffError):
    """An output file could not be written."""


# ═══════════════════════════════════════════════════════════════════
#  READING
# ═══════════════════════════════════════════════════════════════════

# Deepest list/dict nesting accepted on input.
MAX_DEPTH = 128


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a JSON value")


def _nesting_depth(node: Any) -> int:
    """Deepest list/dict nesting in `node`, without recursing."""
    deepest = 0
    stack = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, dict):
            children = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def parse_document(text: str, source: PathLike = "<string>") -> Any:
    """
    Parse JSON text into a document.

    Stricter than json.loads: NaN / Infinity are rejected, and so is
    nesting deeper than MAX_DEPTH.
    """
    try:
        node = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise DocumentParseError(
            f"{source}: invalid JSON at line {e.lineno} column {e.colno}: {e.msg}",
            path=source,
        ) from e
    except ValueError as e:
        raise DocumentParseError(f"{source}: invalid JSON: {e}", path=source) from e
    except RecursionError as e:
        raise DocumentParseError(f"{source}: nesting too deep", path=source) from e

    if _nesting_depth(node) > MAX_DEPTH:
        raise DocumentParseError(
            f"{source}: nesting deeper than {MAX_DEPTH} levels", path=source)
    return node


def read_document(path: PathLike) -> Any:
    """Read and parse a JSON file."""
    path = Path(path)
    logger.debug("reading %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"{path}: not valid UTF-8 ({e.reason})", path=path) from e
    except OSError as e:
        raise DocumentReadError(f"{path}: {e.strerror or e}", path=path) from e
    return parse_document(text, source=path)


# ═══════════════════════════════════════════════════════════════════
#  WRITING
# ═══════════════════════════════════════════════════════════════════

def dump_document(node: Any, indent: int = 2, sort_keys: bool = False) -> str:
    """
    Pretty-print a document.  ABSENT becomes JSON null.

    Always ends with a newline, so the same document always produces
    the same bytes.
    """
    if node is ABSENT:
        node = None
    return json.dumps(node, indent=indent, sort_keys=sort_keys, ensure_ascii=False) + "\n"


def write_document(path: PathLike, node: Any, indent: int = 2, sort_keys: bool = False) -> Path:
    """Write a document (or ABSENT) to `path`.  Returns the path written."""
    path = Path(path)
    text = dump_document(node, indent=indent, sort_keys=sort_keys)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"{path}: {e.strerror or e}", path=path) from e
    logger.debug("wrote %s (%d bytes)", path, len(text))
    return path


def output_paths(prefix: PathLike, suffixes: Iterable[str]) -> dict[str, Path]:
    """
    Output file for each suffix:

        output_paths("out/run", ["eq", "diff_ab"])
            → {"eq": out/run_eq.json, "diff_ab": out/run_diff_ab.json}
    """
    prefix = str(prefix)
    return {suffix: Path(f"{prefix}_{suffix}.json") for suffix in suffixes}
