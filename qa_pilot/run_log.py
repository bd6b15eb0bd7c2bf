from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .models import RunOutcome

LOGGER = logging.getLogger("run_log")

RUN_LOG_FILENAME = "run.jsonl"


class RunLog:
    """Append-only JSON Lines record of suite outcomes, one object per line."""

    def __init__(self, results_dir: Path, filename: str = RUN_LOG_FILENAME) -> None:
        self.path = Path(results_dir) / filename

    def append(self, outcome: RunOutcome) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(outcome.to_record(), ensure_ascii=False)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
        LOGGER.debug("Recorded %s outcome for suite '%s'", outcome.status.value, outcome.suite.name)

    def read_records(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        records: List[Dict[str, Any]] = []
        for line in self.path.read_text(encoding="utf-8").splitlines():
            if line.strip():
                records.append(json.loads(line))
        return records
