from __future__ import annotations

"""
Per-call expansion report.

Filled in by ImportExpander while it resolves directives; the CLI prints it
with --report. Stage timings cover the three passes (files, urls,
commands) summed over every recursion level. Timers are exclusive: while a
nested pass runs, the enclosing stage is paused, so no time is counted twice.
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class ExpansionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    files: List[str] = field(default_factory=list)
    globs: Dict[str, int] = field(default_factory=dict)
    urls: List[str] = field(default_factory=list)
    commands: List[str] = field(default_factory=list)
    max_depth: int = 0

    admitted_chars: int = 0
    output_chars: int = 0
    tokens: Optional[int] = None

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {'files': 0.0, 'urls': 0.0, 'commands': 0.0}
    )
    _timers: List['StageTimer'] = field(default_factory=list, repr=False, compare=False)

    def add_file(self, path: Path, *, depth: int) -> None:
        self.files.append(str(path))
        self.max_depth = max(self.max_depth, depth)

    def add_glob(self, payload: str, matched: int) -> None:
        self.globs[payload] = self.globs.get(payload, 0) + matched

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self, output: str, tokens: int) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at
        self.output_chars = len(output)
        self.tokens = tokens

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                'duration_s': self.duration_s,
                'files': self.files,
                'globs': self.globs,
                'urls': self.urls,
                'commands': self.commands,
                'max_depth': self.max_depth,
                'admitted_chars': self.admitted_chars,
                'output_chars': self.output_chars,
                'tokens': self.tokens,
                'time_by_stage': self.time_by_stage,
            },
            indent=indent,
        )


class StageTimer:
    """Accumulate self time of one stage; a nested timer pauses its parent."""

    def __init__(self, report: ExpansionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def _flush(self, now: float) -> None:
        if self._t0 is not None:
            self._report.add_time(self._stage, now - self._t0)
        self._t0 = now

    def __enter__(self):
        now = time.perf_counter()
        timers = self._report._timers
        if timers:
            timers[-1]._flush(now)
        timers.append(self)
        self._t0 = now
        return self

    def __exit__(self, exc_type, exc, tb):
        now = time.perf_counter()
        timers = self._report._timers
        if timers and timers[-1] is self:
            timers.pop()
        self._flush(now)
        if timers:
            timers[-1]._t0 = now
        return False
