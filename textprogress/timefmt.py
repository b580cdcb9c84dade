"""Duration formatting helpers."""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative values."""
    return int(math.floor(value + 0.5))


def split_duration(seconds: float) -> tuple:
    """Split seconds into (hours, minutes, seconds)."""
    hours = int(seconds // 3600)
    seconds -= hours * 3600
    minutes = int(seconds // 60)
    return hours, minutes, round_half_up(seconds - minutes * 60)


def format_duration(seconds: float) -> str:
    """Format seconds as ' hh:mm:ss'.

    Hours wider than two digits are printed in full. Seconds are rounded
    after minutes are split off, so 59.5 seconds reads ' 00:00:60'.
    """
    return ' %02d:%02d:%02d' % split_duration(seconds)


def format_elapsed_seconds(seconds: float) -> str:
    return f' [{round_half_up(seconds)} seconds]'
