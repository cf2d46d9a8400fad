################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Entry point for replaying a recorded sensor session through the view control.
"""

import argparse
import json
import logging
import math
import sys
from typing import Optional

from oasis_skyview.sensors.config.sensors_config import SensorsConfig
from oasis_skyview.sensors.config.sensors_config import SensorsConfigError
from oasis_skyview.sensors.config.sensors_config import load_sensors_config
from oasis_skyview.sensors.models.declination_model import DeclinationProvider
from oasis_skyview.sensors.models.declination_model import FixedDeclination
from oasis_skyview.sensors.replay.sample_log import SampleLogError
from oasis_skyview.sensors.replay.sample_log import SampleLogRecord
from oasis_skyview.sensors.replay.sample_log import load_sample_log
from oasis_skyview.sensors.replay.sensors_replay import SensorsReplay
from oasis_skyview.sensors.sensors_core import SensorsCore
from oasis_skyview.sensors.sensors_interfaces import Location
from oasis_skyview.sensors.view_state import ViewState


################################################################################
# Replay parameters
################################################################################


DEFAULT_FOV_DEG: float = 60.0

# Replays run without a location source; the declination is given directly
REPLAY_LOCATION: Location = Location(
    latitude_deg=0.0, longitude_deg=0.0, altitude_m=0.0
)
REPLAY_YEAR: float = 2026.0


class _ReplayLocationClock:
    def get_current_location(self) -> Location:
        return REPLAY_LOCATION

    def get_current_year(self) -> float:
        return REPLAY_YEAR


################################################################################
# Entry point
################################################################################


def _parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Replay a JSON-lines sensor log and print view updates"
    )
    parser.add_argument("log", help="Path to the JSON-lines sample log")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with sensor fusion parameters",
    )
    parser.add_argument(
        "--platform",
        default=None,
        help="Override the axis remap platform tag",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=DEFAULT_FOV_DEG,
        help="Initial field of view in degrees",
    )
    parser.add_argument(
        "--declination-deg",
        type=float,
        default=None,
        help="Magnetic declination in degrees, east positive",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(args=args)


def _load_config(options: argparse.Namespace) -> SensorsConfig:
    config: SensorsConfig = (
        SensorsConfig.defaults()
        if options.config is None
        else load_sensors_config(options.config)
    )
    if options.platform is not None:
        data: dict[str, object] = config.params.as_dict()
        data["platform"] = options.platform
        config = SensorsConfig.from_mapping(data)
    return config


def main(args=None) -> int:
    options = _parse_args(args=args)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger: logging.Logger = logging.getLogger("skyview_replay")

    if not math.isfinite(options.fov) or options.fov <= 0.0:
        logger.error("--fov must be finite and > 0, got %s", options.fov)
        return 1
    if options.declination_deg is not None and not math.isfinite(
        options.declination_deg
    ):
        logger.error("--declination-deg must be finite")
        return 1

    try:
        config: SensorsConfig = _load_config(options)
        records: list[SampleLogRecord] = load_sample_log(options.log)
    except (SensorsConfigError, SampleLogError) as exc:
        logger.error("%s", exc)
        return 1

    provider: Optional[DeclinationProvider] = None
    if options.declination_deg is not None:
        provider = FixedDeclination(options.declination_deg)

    view = ViewState(fov_deg=options.fov)
    core = SensorsCore(
        config,
        view,
        declination_provider=provider,
        location_clock=_ReplayLocationClock(),
    )

    replay = SensorsReplay(core, view)
    for output in replay.run(records):
        print(json.dumps(output))

    core.set_enabled(False)

    return 0
