# calculator_inputs.py

import math
from collections import namedtuple
from urllib.parse import urlencode

from projection import ProjectionInputs

FieldSpec = namedtuple('FieldSpec', 'name label default widget min max step help section')

# Defaults come from ProjectionInputs so the page, API and CLI share one profile
_DEFAULT_VALUES = ProjectionInputs().to_dict()


def _field(name, label, widget, low, high, step, help_text, section):
    return FieldSpec(name, label, _DEFAULT_VALUES[name], widget, low, high, step, help_text, section)


# Bounds are widget hints for the page; values outside them are still accepted
FIELDS = [
    _field('targetMonthlyRevenue', 'Target Monthly Revenue ($)', 'number', 1000, None, 500, None, 'goal'),
    _field('pricePerClient', 'Price Per Client ($/month)', 'number', 100, None, 50, None, 'goal'),
    _field('videosPerMonth', 'Videos Per Month', 'number', 0, None, 1, None, 'content'),
    _field('avgViewsPerVideo', 'Average Views Per Video', 'number', 0, None, 50, None, 'content'),
    _field('viewToBookingRatePct', 'View → Booking Rate', 'slider', 0.5, 2, 0.1, 'Benchmark: 0.5–2%', 'conversion'),
    _field('showRatePct', 'Sales Call Show Rate', 'slider', 0, 100, 0.5, 'Benchmark: 60–80%', 'conversion'),
    _field('closeRatePct', 'Sales Call Close Rate', 'slider', 0, 100, 0.5, 'Benchmark: 20–40%', 'conversion'),
]

FIELD_NAMES = [f.name for f in FIELDS]
DEFAULTS = {f.name: f.default for f in FIELDS}


def fields_in_section(section):
    return [f for f in FIELDS if f.section == section]


def parse_number(raw):
    """Parse a finite number, or return None"""

    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None

    if not math.isfinite(value):
        return None
    return value


def number_from_query(params, name, fallback):
    """Read one numeric field; absent, blank, unparseable or non-finite -> fallback"""
    value = parse_number(params.get(name))
    return fallback if value is None else value


def inputs_from_query(params):
    """Build a full input snapshot from a query-string mapping"""
    values = {name: number_from_query(params, name, DEFAULTS[name]) for name in FIELD_NAMES}
    return ProjectionInputs.from_dict(values)


def inputs_from_json(body):
    """Same fallback policy as the query string, for a decoded JSON object"""
    if not isinstance(body, dict):
        body = {}
    return inputs_from_query(body)


def _query_value(value):
    # 12.0 -> "12", 0.8 -> "0.8", 1e200 stays "1e+200"
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def to_query_string(inputs):
    """Encode every field so the URL alone reproduces the projection"""
    values = inputs.to_dict()
    return urlencode([(name, _query_value(values[name])) for name in FIELD_NAMES])
