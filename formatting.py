# formatting.py

import math

from projection import round_half_up

NEVER = '—'


def _is_finite(value):
    return isinstance(value, int) or math.isfinite(value)


def format_int(value):
    """12000.4 -> '12,000'; inf and nan show as the never marker"""
    if not _is_finite(value):
        return NEVER
    return f"{round_half_up(value):,}"


def format_usd(value):
    """11500 -> '$11,500' (no cents)"""
    if not _is_finite(value):
        return NEVER
    amount = round_half_up(value)
    if amount < 0:
        return f"-${-amount:,}"
    return f"${amount:,}"


def format_pct(value):
    return f"{round_half_up(value)}%"


def format_pct1(value):
    return f"{value:.1f}%"


def format_months(value):
    if value is None:
        return NEVER
    return format_int(value)


JINJA_FILTERS = {
    'num': format_int,
    'usd': format_usd,
    'pct': format_pct,
    'pct1': format_pct1,
    'months': format_months,
}
