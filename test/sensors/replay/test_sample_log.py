################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for JSON-lines sample log parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from oasis_skyview.sensors.replay.sample_log import RecordType
from oasis_skyview.sensors.replay.sample_log import SampleLogError
from oasis_skyview.sensors.replay.sample_log import SampleLogRecord
from oasis_skyview.sensors.replay.sample_log import load_sample_log
from oasis_skyview.sensors.replay.sample_log import parse_sample_log
from oasis_skyview.sensors.sensor_types.raw_sample import RawSample
from oasis_skyview.sensors.sensor_types.screen_orientation import RawOrientation


LOG_LINES: list[str] = [
    "# recorded on a phone held upright",
    '{"type": "enable"}',
    "",
    '{"type": "orientation", "value": "left_up"}',
    '{"type": "accel", "x": 0.0, "y": 9.80665, "z": 0}',
    '{"type": "mag", "x": -30.0, "y": 0.0, "z": 0.0}',
    '{"type": "frame", "fov_deg": 45.0, "dt": 0.02}',
    '{"type": "frame"}',
    '{"type": "disable"}',
]


def test_parse_records() -> None:
    """Every record type parses with its payload and line number."""
    records: list[SampleLogRecord] = parse_sample_log(LOG_LINES)

    assert [record.record_type for record in records] == [
        RecordType.ENABLE,
        RecordType.ORIENTATION,
        RecordType.ACCEL,
        RecordType.MAG,
        RecordType.FRAME,
        RecordType.FRAME,
        RecordType.DISABLE,
    ]
    assert records[0].line_number == 2
    assert records[1].orientation == RawOrientation.LEFT_UP
    assert records[2].sample == RawSample(0.0, 9.80665, 0.0)
    assert records[4].fov_deg == 45.0
    assert records[4].dt == 0.02
    assert records[5].fov_deg is None
    assert records[5].dt is None


@pytest.mark.parametrize(
    "line",
    [
        "{not json",
        "[1, 2, 3]",
        '{"type": "gyro"}',
        '{"type": "accel", "x": 1.0, "y": 2.0}',
        '{"type": "accel", "x": 1.0, "y": true, "z": 0.0}',
        '{"type": "mag", "x": 1.0, "y": 2.0, "z": "3"}',
        '{"type": "orientation", "value": "sideways"}',
        '{"type": "frame", "fov_deg": "wide"}',
        '{"type": "frame", "fov_deg": 0}',
        '{"type": "frame", "fov_deg": -30.0}',
        '{"type": "frame", "fov_deg": NaN}',
        '{"type": "frame", "dt": -0.01}',
    ],
)
def test_bad_lines_report_line_number(line: str) -> None:
    """Malformed entries raise SampleLogError naming the line."""
    with pytest.raises(SampleLogError, match="line 2"):
        parse_sample_log(['{"type": "enable"}', line])


def test_load_sample_log(tmp_path: Path) -> None:
    path: Path = tmp_path / "session.jsonl"
    path.write_text("\n".join(LOG_LINES) + "\n", encoding="utf-8")
    assert len(load_sample_log(path)) == 7


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SampleLogError):
        load_sample_log(tmp_path / "missing.jsonl")
