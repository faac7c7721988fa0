from __future__ import annotations
import json, os, tempfile
from pathlib import Path
from typing import Any

def config_dir() -> Path:
    env = os.environ.get("DOC_SIDEBAR_CONFIG_DIR")
    return Path(env).expanduser() if env else Path.home() / ".config" / "doc_sidebar"

def atomic_write_text(path: Path, data: str, mode: int = 0o644) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(dir=path.parent)
    tmp_path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(data)
        try:
            os.chmod(tmp_path, mode)
        except OSError:
            pass  # Windows may not support POSIX perms
        tmp_path.replace(path)
    finally:
        # the temp file is gone after a successful replace
        if tmp_path.exists():
            tmp_path.unlink()

def read_json(path: Path, default: Any) -> Any:
    if not Path(path).exists():
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def write_json(path: Path, obj: Any, mode: int = 0o644) -> None:
    atomic_write_text(Path(path), json.dumps(obj, ensure_ascii=False, indent=2), mode=mode)
