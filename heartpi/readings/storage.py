# -*- coding: utf-8 -*-
"""Readings storage.

Two CSV files under the data root:
- the sensor log, one row per assessment
  (Timestamp,HeartRate,SysBP,DiaBP,Cholesterol,ECG);
- the heart-rate history, ``user,timestamp,bpm`` rows appended after each
  assessment and replayed by the live feed and caregiver alerts.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ..errors import StorageError
from ..risk.engine import SimulatedReading
from ..simulation.sampler import UniformSampler
from .models import HeartRateSample, HeartRateSummary

logger = logging.getLogger(__name__)

READING_COLUMNS = ["Timestamp", "HeartRate", "SysBP", "DiaBP", "Cholesterol", "ECG"]
HISTORY_COLUMNS = ["user", "timestamp", "bpm"]
TIMESTAMP_FORMAT = "%y-%m-%d %H:%M:%S"
HISTORY_SPREAD_BPM = 5.0


def _needs_header(path: Path) -> bool:
    return not path.exists() or path.stat().st_size == 0


def _append_rows(path: Path, frame: pd.DataFrame) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(path, mode="a", header=_needs_header(path), index=False)
    except OSError as exc:
        raise StorageError(f"Failed to write {path}: {exc}") from exc


def _read_frame(path: Path, columns: List[str], **read_options) -> pd.DataFrame:
    if _needs_header(path):
        return pd.DataFrame(columns=columns)
    try:
        frame = pd.read_csv(path, skipinitialspace=True, on_bad_lines="skip", **read_options)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s, treating as empty: %s", path, exc)
        return pd.DataFrame(columns=columns)
    frame.columns = [str(col).strip() for col in frame.columns]
    missing = [col for col in columns if col not in frame.columns]
    if missing:
        logger.warning("%s is missing columns %s, treating as empty", path, missing)
        return pd.DataFrame(columns=columns)
    return frame[columns]


class ReadingLog:
    """Append-only CSV log of simulated sensor readings."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    def append(self, reading: SimulatedReading, timestamp: Optional[datetime] = None) -> str:
        stamp = (timestamp or datetime.now()).strftime(TIMESTAMP_FORMAT)
        row = pd.DataFrame(
            [[
                stamp,
                reading.heart_rate,
                reading.systolic_bp,
                reading.diastolic_bp,
                reading.cholesterol,
                reading.ecg,
            ]],
            columns=READING_COLUMNS,
        )
        _append_rows(self.path, row)
        return stamp

    def read(self) -> pd.DataFrame:
        return _read_frame(self.path, READING_COLUMNS)


class HeartRateHistory:
    """Per-user heart-rate series stored as ``user,timestamp,bpm`` rows."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    def append_simulated(
        self,
        user: str,
        heart_rate: float,
        sampler: UniformSampler,
        *,
        count: int = 20,
        start: Optional[int] = None,
    ) -> List[HeartRateSample]:
        """Append ``count`` one-second samples jittered around ``heart_rate``."""
        start_ts = int(start if start is not None else time.time())
        low = heart_rate - HISTORY_SPREAD_BPM
        high = heart_rate + HISTORY_SPREAD_BPM
        values = sampler.sample_many(low, high, count)
        # Rounding to 0.1 bpm must not leave [low, high].
        samples = [
            HeartRateSample(user=user, timestamp=start_ts + i, bpm=min(max(round(bpm, 1), low), high))
            for i, bpm in enumerate(values)
        ]
        if samples:
            frame = pd.DataFrame([s.model_dump() for s in samples], columns=HISTORY_COLUMNS)
            _append_rows(self.path, frame)
            logger.info("Appended %d heart-rate samples for %s", len(samples), user)
        return samples

    def _user_frame(self, user: str) -> pd.DataFrame:
        # User names such as "NA" or "007" must come back verbatim.
        frame = _read_frame(self.path, HISTORY_COLUMNS, dtype={"user": str}, keep_default_na=False)
        if frame.empty:
            return frame
        frame = frame.assign(
            timestamp=pd.to_numeric(frame["timestamp"], errors="coerce"),
            bpm=pd.to_numeric(frame["bpm"], errors="coerce"),
        ).dropna(subset=["timestamp", "bpm"])
        frame = frame[frame["bpm"] >= 0]
        key = user.strip().lower()
        return frame[frame["user"].astype(str).str.strip().str.lower() == key]

    def samples_for(self, user: str) -> List[HeartRateSample]:
        frame = self._user_frame(user)
        return [
            HeartRateSample(user=str(row.user).strip(), timestamp=int(row.timestamp), bpm=float(row.bpm))
            for row in frame.itertuples(index=False)
        ]

    def summary_for(self, user: str) -> Optional[HeartRateSummary]:
        frame = self._user_frame(user)
        if frame.empty:
            return None
        last = frame.iloc[-1]
        return HeartRateSummary(
            count=len(frame),
            average_bpm=float(frame["bpm"].mean()),
            latest_bpm=float(last["bpm"]),
            latest_timestamp=int(last["timestamp"]),
        )
