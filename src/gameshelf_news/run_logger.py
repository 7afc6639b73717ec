"""JSON logs of aggregator reloads.

One file is written per committed reload. It lists every source with its
outcome, the timed ``fetch`` and ``merge`` stages, and a per-kind count of
the merged pool.
"""

import dataclasses
import uuid
from collections import Counter
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from gameshelf_news.data import FeedFailure, FeedResult, FeedSuccess, NewsEntry


class SourceRecord(BaseModel):
    """Outcome of one source in a reload."""

    url: str
    ok: bool
    entry_count: int = 0
    reason: str | None = None


class StageRecord(BaseModel):
    """A timed step of a reload."""

    stage: str
    component: str
    input: Any = None
    output: Any = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Everything recorded about one reload."""

    run_id: str
    sources: list[str]
    started_at: str
    completed_at: str | None = None
    source_results: list[SourceRecord] = []
    stages: list[StageRecord] = []
    final_entry_count: int = 0
    kind_counts: dict[str, int] = {}


def _to_jsonable(obj: Any) -> Any:
    """Turn entries, feed results and config models into JSON-ready values."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _to_jsonable(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, dict):
        return {str(k): _to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, list | tuple):
        return [_to_jsonable(item) for item in obj]
    return obj


def _now() -> str:
    return datetime.now(tz=UTC).isoformat()


class RunLogger:
    """Collects what happens during a reload and writes it as JSON.

    A disabled logger accepts every call and records nothing. Only one run
    is open at a time; ``start_run`` replaces any run that was never
    finished.

    Args:
        log_dir: Directory the ``run_*.json`` files go to.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: RunRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Where the most recent run was written, if any."""
        return self._last_log_path

    def start_run(self, sources: Sequence[str]) -> None:
        if not self._enabled:
            return
        self._record = RunRecord(
            run_id=uuid.uuid4().hex,
            sources=list(sources),
            started_at=_now(),
        )

    def log_sources(self, results: Sequence[FeedResult]) -> None:
        """Record the per-source outcome of the fetch."""
        if not self._enabled or self._record is None:
            return
        for result in results:
            if isinstance(result, FeedSuccess):
                record = SourceRecord(url=result.url, ok=True, entry_count=len(result.entries))
            elif isinstance(result, FeedFailure):
                record = SourceRecord(url=result.url, ok=False, reason=result.reason)
            else:
                continue
            self._record.source_results.append(record)

    def log_stage(
        self,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        duration_seconds: float,
    ) -> None:
        """Append a timed stage to the open run.

        Args:
            stage: Stage name, "fetch" or "merge" for reloads.
            component: What ran the stage (fetcher class, merge strategy).
            input_data: Stage input, converted to JSON.
            output_data: Stage output, converted to JSON.
            duration_seconds: Wall-clock time of the stage.
        """
        if not self._enabled or self._record is None:
            return
        self._record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input=_to_jsonable(input_data),
                output=_to_jsonable(output_data),
                timestamp=_now(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(self, entries: Sequence[NewsEntry]) -> Path | None:
        """Close the open run and write it out.

        Args:
            entries: The merged pool the reload committed.

        Returns:
            Path of the JSON file, or None if disabled or no run is open.
        """
        if not self._enabled or self._record is None:
            return None

        record = self._record
        self._record = None
        record.completed_at = _now()
        record.final_entry_count = len(entries)
        record.kind_counts = dict(Counter(str(entry.kind) for entry in entries))

        # Colons are not filesystem-safe; microseconds and offset are dropped.
        stamp = record.started_at.split(".")[0].split("+")[0].replace(":", "-")
        self._log_dir.mkdir(parents=True, exist_ok=True)
        path = self._log_dir / f"run_{stamp}_{record.run_id[:8]}.json"
        path.write_text(record.model_dump_json(indent=2))
        self._last_log_path = path
        return path
