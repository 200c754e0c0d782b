#!/usr/bin/env python3
"""
Estimates how long to stay in the sun to make a day's vitamin D, and how long until sunburn
"""

import os
import sys
import pathlib
import logging as log

from argparse import ArgumentParser
from astropy.time import Time
from rich import print as rprint
from rich.panel import Panel

from sunshine_dose.config.exposure_preferences_config import read_exposure_preferences
from sunshine_dose.config.sunshine_dose_config import default_dose_config, read_dose_config
from sunshine_dose.dose.dose_thresholds import thresholds_for_skin_type
from sunshine_dose.dose.result_summary import format_duration, summarize_dose_result
from sunshine_dose.dose.threshold_crossing import (
    instantaneous_dose_estimate,
    integrate_exposure_dose,
)
from sunshine_dose.exposure_parameters_builder import exposure_parameters_from_preferences
from sunshine_dose.oracle.analytic_irradiance_oracle import AnalyticIrradianceOracle
from sunshine_dose.oracle.analytic_position_oracle import AnalyticPositionOracle
from sunshine_dose.sampling.sun_angle_sampler import sample_exposure_day
from sunshine_dose.types.body_part import BodyPart
from sunshine_dose.types.dose_endpoint import DoseEndpoint
from sunshine_dose.types.exposure_preferences import ExposurePreferences
from sunshine_dose.types.fitzpatrick_skin_type import FitzpatrickSkinType
from sunshine_dose.types.sky_condition import SkyCondition
from sunshine_dose.types.time_of_day_mode import TimeOfDayMode


__version__ = "0.1.0"


def process_args():
    # Parse command-line arguments
    parser = ArgumentParser(
        usage="%(prog)s [options]",
        description=__doc__,
        prog=os.path.basename(sys.argv[0]),
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v", action="count", default=0, help="increase verbosity level"
    )
    parser.add_argument(
        "--preferences", "-p", default=None, help="YAML file of exposure preferences"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="YAML dose configuration file to use"
    )
    parser.add_argument("--latitude", type=float, required=True, help="degrees north")
    parser.add_argument("--longitude", type=float, required=True, help="degrees east")
    parser.add_argument(
        "--altitude", type=float, default=0.0, help="meters above sea level"
    )
    parser.add_argument(
        "--time",
        default=None,
        help="start of exposure (ISO format, UTC); implies a custom time of day",
    )
    parser.add_argument(
        "--now",
        action="store_true",
        help="start exposure now instead of around solar noon",
    )
    parser.add_argument(
        "--utc-offset", type=int, default=None, help="local time offset from UTC in seconds"
    )
    parser.add_argument(
        "--skin-type", choices=FitzpatrickSkinType.all_skin_types(), default=None
    )
    parser.add_argument("--sky", choices=SkyCondition.all_sky_conditions(), default=None)
    parser.add_argument(
        "--body-parts", nargs="+", choices=BodyPart.all_body_parts(), default=None
    )
    parser.add_argument(
        "--instantaneous",
        action="store_true",
        help="estimate from the sun at the start of exposure only, without integrating over the day",
    )
    parser.add_argument(
        "--sun-angles",
        type=int,
        default=0,
        help="also print the sun elevation at this many instants across the day",
    )

    args = parser.parse_args()

    # handle verbosity
    if args.verbose >= 2:
        log.basicConfig(format="%(levelname)s: %(message)s", level=log.DEBUG)
    elif args.verbose == 1:
        log.basicConfig(format="%(levelname)s: %(message)s", level=log.INFO)
    else:
        log.basicConfig(format="%(levelname)s: %(message)s")

    return args


def preferences_from_args(args) -> ExposurePreferences | None:
    if args.preferences is not None:
        exposure_preferences = read_exposure_preferences(pathlib.Path(args.preferences))
        if exposure_preferences is None:
            return None
    else:
        exposure_preferences = ExposurePreferences()

    if args.skin_type is not None:
        exposure_preferences.skin_type = FitzpatrickSkinType(args.skin_type)
    if args.sky is not None:
        exposure_preferences.sky_condition = SkyCondition(args.sky)
    if args.body_parts is not None:
        exposure_preferences.exposed_body_parts = [BodyPart(x) for x in args.body_parts]
    if args.utc_offset is not None:
        exposure_preferences.utc_offset_s = args.utc_offset
    if args.now:
        exposure_preferences.time_of_day_mode = TimeOfDayMode.now
    if args.time is not None:
        exposure_preferences.time_of_day_mode = TimeOfDayMode.custom
        exposure_preferences.custom_time = Time(args.time, scale="utc")

    return exposure_preferences


def main():
    args = process_args()

    if args.config is not None:
        sdc = read_dose_config(pathlib.Path(args.config))
        if sdc is None:
            print(f"Could not read dose configuration {args.config}!")
            return 1
    else:
        sdc = default_dose_config()

    exposure_preferences = preferences_from_args(args)
    if exposure_preferences is None:
        print(f"Could not read preferences from {args.preferences}!")
        return 1

    irradiance_oracle = AnalyticIrradianceOracle(atmosphere_config=sdc.atmosphere)

    exposure_parameters = exposure_parameters_from_preferences(
        exposure_preferences=exposure_preferences,
        latitude_deg=args.latitude,
        longitude_deg=args.longitude,
        altitude_m=args.altitude,
        irradiance_oracle=irradiance_oracle,
    )
    dose_threshold = thresholds_for_skin_type(exposure_preferences.skin_type)

    rprint(
        Panel(
            f"day {exposure_parameters.day_of_year}, "
            f"start {format_duration(exposure_parameters.seconds_since_midnight_utc)} after midnight UTC, "
            f"{exposure_parameters.exposed_skin_fraction * 100:.1f}% skin exposed, "
            f"{exposure_parameters.sky_condition} sky",
            title="[orange3]Exposure[/orange3]",
        )
    )

    if args.instantaneous:
        estimate = instantaneous_dose_estimate(
            exposure_parameters=exposure_parameters,
            dose_threshold=dose_threshold,
            oracle=irradiance_oracle,
            dose_config=sdc.dose_calculation,
        )
        for name, rate, time_s in [
            ("Vitamin D", estimate.vitamin_d_W_m2, estimate.vitamin_d_time_s),
            ("Sunburn", estimate.erythema_W_m2, estimate.erythema_time_s),
        ]:
            if time_s <= 0.0:
                rprint(f"[blue]{name}:[/blue] no light right now")
            else:
                rprint(
                    f"[blue]{name}:[/blue] {format_duration(time_s)} at the current rate of {rate:.4g}"
                )
        return 0

    dose_result = integrate_exposure_dose(
        exposure_parameters=exposure_parameters,
        dose_threshold=dose_threshold,
        oracle=irradiance_oracle,
        dose_config=sdc.dose_calculation,
    )
    summary = summarize_dose_result(dose_result)
    rprint(f"[green]{summary[DoseEndpoint.vitamin_d]}[/green]")
    rprint(f"[red]{summary[DoseEndpoint.erythema]}[/red]")

    if args.sun_angles > 0:
        print("")
        for sample in sample_exposure_day(
            exposure_parameters=exposure_parameters,
            dose_result=dose_result,
            num_samples=args.sun_angles,
            position_oracle=AnalyticPositionOracle(),
            utc_offset_s=exposure_preferences.utc_offset_s,
        ):
            marker = "[yellow]*[/yellow]" if sample.in_exposure_window else " "
            rprint(
                f"{marker} {format_duration(sample.time_of_day_s):>12}\t{sample.elevation_deg:7.2f}°"
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())
