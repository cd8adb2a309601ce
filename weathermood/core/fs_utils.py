import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Optional


def ensure_parent_dir(path: Path | str) -> None:
    """
    Create the directory that will hold `path` if it is missing.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def write_json(path: str | Path, data: Any) -> None:
    """
    Persist `data` as JSON, replacing the target file atomically.

    The document goes to a temporary sibling file first, is fsynced, then
    moved over `path` with os.replace. Readers see either the previous token
    file or the new one, never a half-written file.
    """
    target_path = Path(path)
    ensure_parent_dir(target_path)

    fd, tmp_name = tempfile.mkstemp(
        dir=str(target_path.parent),
        prefix=target_path.name,
        suffix=".tmp",
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, target_path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def read_json(
    path: str | Path,
    default: Any = None,
    *,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> Any:
    """
    Read a JSON file, returning `default` when it is missing or unparsable.

    `on_error` is called with the decoding error when the file exists but
    is corrupted.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return default
    except json.JSONDecodeError as e:
        if on_error:
            on_error(e)
        return default


def remove_file(path: str | Path) -> bool:
    """
    Delete `path` if it exists. Returns True when a file was removed.
    """
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    return True
