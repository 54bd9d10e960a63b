"""Human-readable formatting for byte counts and durations."""

BYTE_UNITS = ["KB", "MB", "GB", "TB", "PB", "EB"]


def format_bytes(count: int | float) -> str:
    """Format a byte count with binary (1024) scaling.

    Examples:
        >>> format_bytes(512)
        '512 B'
        >>> format_bytes(1536)
        '1.50 KB'
        >>> format_bytes(10 * 1024 * 1024)
        '10.0 MB'
    """
    count = int(count)
    unit = 1024
    if count < unit:
        return f"{count} B"

    div, exp = unit, 0
    n = count // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit

    value = count / div
    if value >= 10:
        return f"{value:.1f} {BYTE_UNITS[exp]}"
    return f"{value:.2f} {BYTE_UNITS[exp]}"


def format_uptime(seconds: int) -> str:
    """Format seconds as days/hours/minutes, dropping zero parts.

    Examples:
        >>> format_uptime(90061)
        '1d 1h 1m'
        >>> format_uptime(7200)
        '2h'
        >>> format_uptime(30)
        '0m'
    """
    minutes_total = max(int(seconds), 0) // 60
    days, rest = divmod(minutes_total, 24 * 60)
    hours, minutes = divmod(rest, 60)

    parts = [
        f"{value}{suffix}"
        for value, suffix in ((days, "d"), (hours, "h"), (minutes, "m"))
        if value > 0
    ]
    return " ".join(parts) or "0m"
