from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def write_file(
    path: Path,
    content: str,
    create_dirs: bool = True,
    ensure_trailing_newline: bool = True,
) -> Path:
    """Create or overwrite a UTF-8 file at ``path`` and return its path."""
    target = Path(path)
    if create_dirs:
        target.parent.mkdir(parents=True, exist_ok=True)
    if ensure_trailing_newline and content and not content.endswith("\n"):
        content = content + "\n"
    target.write_text(content, encoding="utf-8")
    return target


def write_file_if_absent(path: Path, content: str) -> bool:
    target = Path(path)
    if target.exists():
        return False
    write_file(target, content)
    return True


def list_files(folder: Path, suffix: str) -> List[Path]:
    if not folder.is_dir():
        return []
    return sorted(
        entry for entry in folder.iterdir() if entry.is_file() and entry.name.endswith(suffix)
    )


def run_command(
    command: Sequence[str],
    *,
    cwd: Optional[Path] = None,
    timeout_seconds: float = 60,
    runner: Runner = subprocess.run,
) -> Dict[str, object]:
    """Run ``command`` and return its exit code with captured stdout and stderr.

    A timeout is reported in the result rather than raised.
    """
    try:
        completed = runner(
            list(command),
            capture_output=True,
            text=True,
            timeout=timeout_seconds,
            cwd=cwd,
        )
        return {
            "command": list(command),
            "returncode": completed.returncode,
            "stdout": completed.stdout or "",
            "stderr": completed.stderr or "",
            "timeout": False,
        }
    except subprocess.TimeoutExpired as exc:
        return {
            "command": list(command),
            "returncode": None,
            "stdout": _as_text(exc.stdout),
            "stderr": _as_text(exc.stderr),
            "timeout": True,
        }


def _as_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)
