def format_duration(seconds: float) -> str:
    """
    Returns a duration in compact hour/minute/second notation.

    Leading zero units are omitted and fractional seconds keep up to three
    decimals, e.g. ``1h0m5s``, ``2m30s``, ``1.5s``, ``0s``.

    Arguments:
        seconds (float): Duration in seconds.

    Returns:
        str: Formatted duration.
    """
    sign = "-" if seconds < 0 else ""
    millis = int(round(abs(seconds) * 1000))
    whole, fraction = divmod(millis, 1000)
    minutes, secs = divmod(whole, 60)
    hours, minutes = divmod(minutes, 60)

    seconds_text = f"{secs}.{fraction:03d}".rstrip("0").rstrip(".") if fraction else str(secs)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds_text}s"
    if minutes:
        return f"{sign}{minutes}m{seconds_text}s"
    return f"{sign}{seconds_text}s"
