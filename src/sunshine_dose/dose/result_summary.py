from sunshine_dose.types.dose_endpoint import DoseEndpoint
from sunshine_dose.types.dose_result import DoseResult


_endpoint_descriptions = {
    DoseEndpoint.vitamin_d: "daily vitamin D",
    DoseEndpoint.erythema: "sunburn",
}


def format_duration(seconds: float) -> str:
    """Abbreviated hours, minutes and seconds, e.g. '1h 4m 12s'"""
    total_seconds = int(round(max(seconds, 0.0)))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def describe_progress(
    endpoint: DoseEndpoint, percent_of_target: float, time_s: float
) -> str:
    description = _endpoint_descriptions[endpoint]

    if percent_of_target <= 0.0:
        return f"Not enough light to make progress toward {description}"
    if percent_of_target < 1.0:
        return f"{percent_of_target * 100.0:.0f}% of {description} dose by the end of the day"
    # str.capitalize() would lowercase the D in vitamin D
    return f"{description[:1].upper()}{description[1:]}: {format_duration(time_s)}"


def summarize_dose_result(dose_result: DoseResult) -> dict[DoseEndpoint, str]:
    return {
        DoseEndpoint.vitamin_d: describe_progress(
            DoseEndpoint.vitamin_d,
            dose_result.vitamin_d_percent_of_target,
            dose_result.vitamin_d_time_s,
        ),
        DoseEndpoint.erythema: describe_progress(
            DoseEndpoint.erythema,
            dose_result.erythema_percent_of_target,
            dose_result.erythema_time_s,
        ),
    }
