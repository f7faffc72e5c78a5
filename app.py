from flask import Flask, render_template, request, jsonify, current_app
import logging
import math
import click
from calculator_inputs import (
    FIELDS, fields_in_section, inputs_from_query, inputs_from_json, to_query_string,
)
from projection import WIRE_NAMES, ProjectionInputs, compute_projection
from formatting import JINJA_FILTERS, format_int, format_usd, format_months
from subscribe_relay import SubscribeError, relay_subscription
from config import Config

# Initialize
app = Flask(__name__)
app.config.from_object(Config)

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
app.logger.setLevel(app.config['LOG_LEVEL'])

app.jinja_env.filters.update(JINJA_FILTERS)


def _json_number(value):
    # JSON has no Infinity or NaN
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def projection_response(inputs):
    projection = compute_projection(inputs)
    return {
        'inputs': inputs.to_dict(),
        'projection': {k: _json_number(v) for k, v in projection.to_dict().items()},
        'share': '?' + to_query_string(inputs),
    }


@app.errorhandler(SubscribeError)
def handle_subscribe_error(e):
    current_app.logger.info(f"Subscribe rejected: {type(e).__name__} ({e})")
    return jsonify(e.to_response()), e.status_code


# Routes
@app.route('/')
def index():
    """Calculator page; the GET form keeps every input in the URL"""

    inputs = inputs_from_query(request.args)
    projection = compute_projection(inputs)

    return render_template('index.html',
                         title=app.config['PAGE_TITLE'],
                         values=inputs.to_dict(),
                         projection=projection,
                         goal_fields=fields_in_section('goal'),
                         content_fields=fields_in_section('content'),
                         conversion_fields=fields_in_section('conversion'),
                         share_query=to_query_string(inputs))


@app.route('/api/projection', methods=['GET', 'POST'])
def api_projection():
    if request.method == 'POST':
        inputs = inputs_from_json(request.get_json(silent=True))
    else:
        inputs = inputs_from_query(request.args)

    return jsonify(projection_response(inputs))


@app.route('/api/subscribe', methods=['POST'])
def subscribe():
    body = request.get_json(silent=True)

    result = relay_subscription(
        body,
        current_app.config.get('SUBSCRIBE_WEBHOOK_URL'),
        source=current_app.config['SUBSCRIBE_SOURCE'],
        timeout=current_app.config['SUBSCRIBE_TIMEOUT'],
    )
    return jsonify(result)


# CLI: flask --app app project --price-per-client 2000 ...
def _field_option(field):
    attr = WIRE_NAMES[field.name]
    flag = '--' + attr.replace('_', '-')
    return click.option(flag, attr, type=float, default=None,
                        help=f"{field.label} (default {field.default})")


def _project_command(**overrides):
    """Print the funnel projection for the given assumptions."""

    inputs = ProjectionInputs(**{k: v for k, v in overrides.items() if v is not None})
    projection = compute_projection(inputs)

    click.echo(f"Clients needed:    {format_int(projection.clients_needed)}")
    click.echo(f"Monthly reach:     {format_int(projection.monthly_reach)}")
    click.echo(f"Bookings/month:    {format_int(projection.bookings_per_month)}")
    click.echo(f"Shows/month:       {format_int(projection.shows_per_month)}")
    click.echo(f"New clients/month: {format_int(projection.new_clients_per_month)}")
    click.echo(f"New MRR:           {format_usd(projection.new_mrr)}")
    click.echo(f"Months to goal:    {format_months(projection.months_to_goal)}")
    click.echo(f"Share:             /?{to_query_string(inputs)}")


project_command = _project_command
for _field in reversed(FIELDS):  # click applies options bottom-up
    project_command = _field_option(_field)(project_command)
app.cli.command('project')(project_command)


if __name__ == '__main__':
    app.run(debug=True, port=5000)
