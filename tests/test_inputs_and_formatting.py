import math
from urllib.parse import parse_qs

import pytest

from calculator_inputs import (
    DEFAULTS, FIELD_NAMES, inputs_from_json, inputs_from_query, number_from_query, to_query_string,
)
from formatting import format_int, format_months, format_pct, format_pct1, format_usd
from projection import ProjectionInputs


def test_defaults_profile():
    assert DEFAULTS == {
        'targetMonthlyRevenue': 50000,
        'pricePerClient': 500,
        'videosPerMonth': 12,
        'avgViewsPerVideo': 1000,
        'viewToBookingRatePct': 0.8,
        'showRatePct': 60,
        'closeRatePct': 40,
    }


@pytest.mark.parametrize('raw', [None, '', '   ', 'abc', '12abc', 'nan', 'NaN', 'inf', '-Infinity', '1e999'])
def test_number_from_query_falls_back(raw):
    params = {} if raw is None else {'pricePerClient': raw}
    assert number_from_query(params, 'pricePerClient', 500) == 500


@pytest.mark.parametrize('raw,expected', [('2000', 2000), (' 1.5 ', 1.5), ('-3', -3), ('0', 0), ('1e3', 1000)])
def test_number_from_query_parses(raw, expected):
    assert number_from_query({'pricePerClient': raw}, 'pricePerClient', 500) == expected


def test_inputs_from_query_mixes_values_and_defaults():
    inputs = inputs_from_query({'pricePerClient': '2000', 'closeRatePct': 'oops'})
    assert inputs.price_per_client == 2000
    assert inputs.close_rate_pct == 40
    assert inputs.videos_per_month == 12


def test_inputs_from_json_rejects_booleans_and_non_objects():
    inputs = inputs_from_json({'videosPerMonth': True, 'avgViewsPerVideo': 1500})
    assert inputs.videos_per_month == 12
    assert inputs.avg_views_per_video == 1500
    assert inputs_from_json(['not', 'an', 'object']) == inputs_from_query({})
    assert inputs_from_json(None) == inputs_from_query({})


def test_query_string_reproduces_inputs():
    inputs = inputs_from_query({'pricePerClient': '2000', 'viewToBookingRatePct': '1.7'})
    query = to_query_string(inputs)
    parsed = parse_qs(query)
    assert list(parsed) == FIELD_NAMES
    assert parsed['pricePerClient'] == ['2000']
    assert parsed['viewToBookingRatePct'] == ['1.7']
    assert inputs_from_query({k: v[0] for k, v in parsed.items()}) == inputs


def test_format_int():
    assert format_int(12000) == '12,000'
    assert format_int(57.6) == '58'
    assert format_int(0) == '0'


def test_format_usd():
    assert format_usd(11500) == '$11,500'
    assert format_usd(126000) == '$126,000'
    assert format_usd(-500) == '-$500'


def test_format_percents():
    assert format_pct(60) == '60%'
    assert format_pct(32.5) == '33%'
    assert format_pct1(0.8) == '0.8%'
    assert format_pct1(2) == '2.0%'


def test_format_months_never_marker():
    assert format_months(None) == '—'
    assert format_months(5) == '5'
    assert format_months(0) == '0'


def test_defaults_come_from_projection_inputs():
    assert DEFAULTS == ProjectionInputs().to_dict()
    assert inputs_from_query({}) == ProjectionInputs()


def test_formatters_mark_non_finite_values():
    assert format_int(math.inf) == '—'
    assert format_int(math.nan) == '—'
    assert format_usd(math.inf) == '—'
    assert format_usd(-math.inf) == '—'


def test_formatters_accept_huge_integers():
    assert format_int(10 ** 20) == '100,000,000,000,000,000,000'
    assert format_usd(10 ** 400).startswith('$1,000,000')


def test_query_string_keeps_huge_values_compact():
    inputs = inputs_from_query({'videosPerMonth': '1e200'})
    parsed = parse_qs(to_query_string(inputs))
    assert parsed['videosPerMonth'] == ['1e+200']
