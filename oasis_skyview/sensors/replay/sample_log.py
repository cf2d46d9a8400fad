################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""JSON-lines sample logs for replaying recorded sensor sessions.

Each non-blank line is one JSON object with a "type" key:

    {"type": "enable"}
    {"type": "orientation", "value": "left_up"}
    {"type": "accel", "x": 0.0, "y": 0.0, "z": 9.80665}
    {"type": "mag", "x": 22.1, "y": -4.0, "z": -40.3}
    {"type": "frame", "fov_deg": 60.0, "dt": 0.016}
    {"type": "disable"}

Lines starting with "#" are comments.
"""

from __future__ import annotations

import enum
import json
import math
import numbers
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Iterable
from typing import Optional

from oasis_skyview.sensors.sensor_types.raw_sample import RawSample
from oasis_skyview.sensors.sensor_types.screen_orientation import RawOrientation


class SampleLogError(Exception):
    """Raised when a sample log line cannot be parsed."""


class RecordType(enum.Enum):
    ENABLE = "enable"
    DISABLE = "disable"
    ORIENTATION = "orientation"
    ACCEL = "accel"
    MAG = "mag"
    FRAME = "frame"


@dataclass(frozen=True)
class SampleLogRecord:
    """One parsed sample log entry.

    Attributes:
        record_type: Kind of entry
        line_number: 1-based line in the source log
        sample: Raw sample for accel and mag entries
        orientation: Hardware reading for orientation entries
        fov_deg: Field of view to apply before a frame, if given
        dt: Frame time step in seconds, if given
    """

    record_type: RecordType
    line_number: int
    sample: Optional[RawSample] = None
    orientation: Optional[RawOrientation] = None
    fov_deg: Optional[float] = None
    dt: Optional[float] = None


def parse_sample_log(lines: Iterable[str]) -> list[SampleLogRecord]:
    """Parse sample log lines into records."""
    records: list[SampleLogRecord] = []
    for line_number, line in enumerate(lines, start=1):
        text: str = line.strip()
        if not text or text.startswith("#"):
            continue
        try:
            loaded: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SampleLogError(f"line {line_number}: invalid JSON") from exc
        records.append(_record_from_dict(loaded, line_number))
    return records


def load_sample_log(path: str | os.PathLike[str]) -> list[SampleLogRecord]:
    """Load and parse a sample log file."""
    path_obj: Path = Path(os.fspath(path))
    try:
        text: str = path_obj.read_text(encoding="utf-8")
    except OSError as exc:
        raise SampleLogError(f"Failed to read sample log {path_obj}") from exc
    return parse_sample_log(text.splitlines())


def _record_from_dict(data: object, line_number: int) -> SampleLogRecord:
    if not isinstance(data, dict):
        raise SampleLogError(f"line {line_number}: record must be an object")

    type_name: object = data.get("type")
    try:
        record_type: RecordType = RecordType(type_name)
    except ValueError:
        raise SampleLogError(
            f"line {line_number}: unknown record type {type_name!r}"
        ) from None

    if record_type in (RecordType.ACCEL, RecordType.MAG):
        components: list[float] = [
            _require_float(data.get(axis), axis, line_number)
            for axis in ("x", "y", "z")
        ]
        try:
            sample: RawSample = RawSample.from_sequence(components)
        except ValueError as exc:
            raise SampleLogError(f"line {line_number}: {exc}") from exc
        return SampleLogRecord(record_type, line_number, sample=sample)

    if record_type == RecordType.ORIENTATION:
        value: object = data.get("value")
        try:
            orientation: RawOrientation = RawOrientation(value)
        except ValueError:
            raise SampleLogError(
                f"line {line_number}: unknown orientation {value!r}"
            ) from None
        return SampleLogRecord(record_type, line_number, orientation=orientation)

    if record_type == RecordType.FRAME:
        fov_deg: Optional[float] = None
        dt: Optional[float] = None
        if "fov_deg" in data:
            fov_deg = _require_float(data["fov_deg"], "fov_deg", line_number)
            if not math.isfinite(fov_deg) or fov_deg <= 0.0:
                raise SampleLogError(
                    f"line {line_number}: fov_deg must be finite and > 0"
                )
        if "dt" in data:
            dt = _require_float(data["dt"], "dt", line_number)
            if not math.isfinite(dt) or dt < 0.0:
                raise SampleLogError(f"line {line_number}: dt must be finite and >= 0")
        return SampleLogRecord(record_type, line_number, fov_deg=fov_deg, dt=dt)

    return SampleLogRecord(record_type, line_number)


def _require_float(value: object, name: str, line_number: int) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise SampleLogError(f"line {line_number}: {name} must be a number")
    return float(value)
