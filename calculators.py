# calculators.py
import logging
import math
from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP, localcontext

logger = logging.getLogger(__name__)

# -------- Display constants --------
GAUGE_CEILING = 40.0  # doughnut gauge tops out here; BMI above it is drawn full

BmiResult = namedtuple("BmiResult", ["value", "ratio"])
SleepResult = namedtuple("SleepResult", ["hours"])


class InvalidInput(ValueError):
    """Raised when a calculator gets something it cannot compute with."""


def round1(x):
    """Round to one decimal place, halves going up (like JS toFixed on the site).

    `x` must be finite; callers check that first.
    """
    d = Decimal(repr(x))
    with localcontext() as ctx:
        # room for every integer digit plus the one decimal
        ctx.prec = max(ctx.prec, d.adjusted() + 3)
        return float(d.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def parse_positive(value, label):
    if value is None or isinstance(value, bool):
        raise InvalidInput(f"Please enter your {label}.")
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            raise InvalidInput(f"Please enter your {label}.")
    try:
        num = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{label.capitalize()} must be a number.") from None
    if not math.isfinite(num) or num <= 0:
        raise InvalidInput(f"{label.capitalize()} must be a positive number.")
    return num


# -------- BMI --------
def compute_bmi(height_cm, weight_kg):
    h = parse_positive(height_cm, "height") / 100.0
    w = parse_positive(weight_kg, "weight")
    # tiny heights underflow to 0 or push the ratio to inf
    raw = w / h / h if h > 0 else math.inf
    if not math.isfinite(raw):
        raise InvalidInput("Height is too small to compute a BMI.")
    value = round1(raw)
    ratio = min(1.0, max(0.0, value / GAUGE_CEILING))
    logger.debug("bmi height_cm=%s weight_kg=%s -> %s", height_cm, weight_kg, value)
    return BmiResult(value, ratio)


def gauge_segments(result):
    # second segment never goes negative, even for BMI over the ceiling
    return [result.value, round1(max(0.0, GAUGE_CEILING - result.value))]


# -------- Sleep --------
def _check_clock(hour, minute):
    if isinstance(hour, bool) or isinstance(minute, bool):
        raise InvalidInput("Time must be given as hours and minutes.")
    if not isinstance(hour, int) or not isinstance(minute, int):
        raise InvalidInput("Time must be given as hours and minutes.")
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidInput(f"{hour:02d}:{minute:02d} is not a valid time of day.")


def parse_time_of_day(text):
    """Turn an <input type="time"> value ("HH:MM", seconds allowed) into (hour, minute)."""
    if text is None or not str(text).strip():
        raise InvalidInput("Please enter both times.")
    parts = str(text).strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isascii() and p.isdecimal() for p in parts):
        raise InvalidInput(f"'{text}' is not a valid time (expected HH:MM).")
    hour, minute = int(parts[0]), int(parts[1])
    _check_clock(hour, minute)
    return hour, minute


def compute_sleep_hours(bed_hour, bed_minute, wake_hour, wake_minute):
    _check_clock(bed_hour, bed_minute)
    _check_clock(wake_hour, wake_minute)
    diff = (wake_hour * 60 + wake_minute) - (bed_hour * 60 + bed_minute)
    if diff < 0:
        diff += 24 * 60
    # minutes/60 in Decimal so 7.75 stays 7.75 before rounding
    hours = (Decimal(diff) / Decimal(60)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    logger.debug("sleep %02d:%02d -> %02d:%02d = %s h", bed_hour, bed_minute, wake_hour, wake_minute, hours)
    return SleepResult(float(hours))
