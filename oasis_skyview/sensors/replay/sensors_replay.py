################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import logging
from typing import Iterable
from typing import Optional

from oasis_skyview.sensors.models.view_composer import heading_deg
from oasis_skyview.sensors.replay.sample_log import RecordType
from oasis_skyview.sensors.replay.sample_log import SampleLogRecord
from oasis_skyview.sensors.sensor_types.view_frame import TickReport
from oasis_skyview.sensors.sensors_core import SensorsCore
from oasis_skyview.sensors.view_state import ViewState


_LOG: logging.Logger = logging.getLogger(__name__)

# Units: s. Meaning: frame step used when a frame record has no dt
DEFAULT_FRAME_DT_S: float = 1.0 / 60.0


class SensorsReplay:
    """Feeds recorded samples to a SensorsCore in log order.

    Samples and orientation events are delivered as they appear; each frame
    record runs one update tick, the way the render loop would.
    """

    def __init__(self, core: SensorsCore, view: ViewState) -> None:
        self._core: SensorsCore = core
        self._view: ViewState = view
        self._frame_index: int = 0

    def run(self, records: Iterable[SampleLogRecord]) -> list[dict[str, object]]:
        """Replay records and return one output dict per frame that updated."""
        outputs: list[dict[str, object]] = []
        for record in records:
            output: Optional[dict[str, object]] = self.step(record)
            if output is not None:
                outputs.append(output)
        return outputs

    def step(self, record: SampleLogRecord) -> Optional[dict[str, object]]:
        """Apply one record, returning the frame output if a tick ran."""
        if record.record_type == RecordType.ENABLE:
            self._core.set_enabled(True)
        elif record.record_type == RecordType.DISABLE:
            self._core.set_enabled(False)
        elif record.record_type == RecordType.ORIENTATION:
            if record.orientation is not None:
                self._core.on_orientation_event(record.orientation)
        elif record.record_type == RecordType.ACCEL:
            if record.sample is not None:
                self._core.on_accel_sample(record.sample)
        elif record.record_type == RecordType.MAG:
            if record.sample is not None:
                self._core.on_mag_sample(record.sample)
        elif record.record_type == RecordType.FRAME:
            return self._frame(record)
        return None

    def _frame(self, record: SampleLogRecord) -> Optional[dict[str, object]]:
        frame_index: int = self._frame_index
        self._frame_index += 1

        if record.fov_deg is not None:
            self._view.set_fov_deg(record.fov_deg)

        dt: float = DEFAULT_FRAME_DT_S if record.dt is None else record.dt
        report: Optional[TickReport] = self._core.update(dt)
        if report is None:
            _LOG.debug(
                "Frame %d (line %d) produced no update",
                frame_index,
                record.line_number,
            )
            return None

        output: dict[str, object] = {"frame": frame_index}
        output.update(report.as_dict())
        if report.attitude.has_azimuth:
            output["heading_deg"] = heading_deg(report.attitude)
        return output
