"""Goal-keyed persistence of generated test plans."""

from __future__ import annotations

import hashlib
import json
import logging
import re
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .errors import PlanCacheError
from .models import CacheEntry, TestPlan

LOGGER = logging.getLogger("plan_cache")

GOAL_PREFIX_LENGTH = 30
DIGEST_LENGTH = 8


def cache_key(goal: str) -> str:
    """Filename stem for ``goal``: a sanitized prefix plus a truncated MD5 digest.

    Two goals sharing the 8 hex digest characters collide; that is accepted.
    """
    digest = hashlib.md5(goal.encode("utf-8")).hexdigest()[:DIGEST_LENGTH]
    prefix = re.sub(r"[^a-zA-Z0-9]", "_", goal)[:GOAL_PREFIX_LENGTH]
    return f"{prefix}_{digest}"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class PlanCache:
    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, goal: str) -> Path:
        return self.root / f"{cache_key(goal)}.json"

    def save(self, goal: str, plan: TestPlan) -> Path:
        self._ensure_root()
        file_name = cache_key(goal)
        entry = CacheEntry(goal=goal, plan=plan, timestamp=_utc_now_iso(), file_name=file_name)
        target = self.root / f"{file_name}.json"
        target.write_text(json.dumps(entry.to_payload(), indent=2), encoding="utf-8")
        LOGGER.info("Test plan saved to %s", target)
        return target

    def load(self, goal: str) -> Optional[TestPlan]:
        """Return the cached plan, or ``None`` when nothing is cached for ``goal``."""
        target = self.path_for(goal)
        if not target.exists():
            return None
        try:
            entry = CacheEntry.model_validate_json(target.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            raise PlanCacheError(f"Cached plan {target} is not a valid cache entry: {exc}") from exc
        return entry.plan

    def has_plan(self, goal: str) -> bool:
        return self.path_for(goal).exists()

    def list_all(self) -> List[CacheEntry]:
        if not self.root.is_dir():
            return []
        entries: List[CacheEntry] = []
        for path in sorted(self.root.glob("*.json")):
            try:
                entries.append(CacheEntry.model_validate_json(path.read_text(encoding="utf-8")))
            except (OSError, UnicodeDecodeError, ValidationError) as exc:
                LOGGER.warning("Skipping unreadable plan file %s: %s", path, exc)
        return entries

    def delete(self, goal: str) -> bool:
        target = self.path_for(goal)
        if not target.exists():
            return False
        target.unlink()
        LOGGER.info("Test plan deleted: %s", target)
        return True

    def clear_all(self) -> None:
        if self.root.exists():
            shutil.rmtree(self.root)
        self._ensure_root()
        LOGGER.info("All test plans cleared from %s", self.root)
