# projection.py

import math
from dataclasses import dataclass, asdict

# wire name -> attribute name
WIRE_NAMES = {
    'targetMonthlyRevenue': 'target_monthly_revenue',
    'pricePerClient': 'price_per_client',
    'videosPerMonth': 'videos_per_month',
    'avgViewsPerVideo': 'avg_views_per_video',
    'viewToBookingRatePct': 'view_to_booking_rate_pct',
    'showRatePct': 'show_rate_pct',
    'closeRatePct': 'close_rate_pct',
}


@dataclass(frozen=True)
class ProjectionInputs:
    target_monthly_revenue: float = 50000
    price_per_client: float = 500
    videos_per_month: float = 12
    avg_views_per_video: float = 1000
    view_to_booking_rate_pct: float = 0.8  # percent, 0.8 means 0.8%
    show_rate_pct: float = 60
    close_rate_pct: float = 40

    @classmethod
    def from_dict(cls, data):
        """Build from a camelCase mapping; missing keys keep their defaults"""
        kwargs = {attr: data[wire] for wire, attr in WIRE_NAMES.items() if wire in data}
        return cls(**kwargs)

    def to_dict(self):
        values = asdict(self)
        return {wire: values[attr] for wire, attr in WIRE_NAMES.items()}


@dataclass(frozen=True)
class Projection:
    clients_needed: int
    monthly_reach: float
    bookings_per_month: float
    shows_per_month: float
    new_clients_per_month: float
    new_mrr: float
    months_to_goal: int = None  # None means the goal is never reached

    @property
    def reaches_goal(self):
        return self.months_to_goal is not None

    def to_dict(self):
        return {
            'clientsNeeded': self.clients_needed,
            'monthlyReach': self.monthly_reach,
            'bookingsPerMonth': self.bookings_per_month,
            'showsPerMonth': self.shows_per_month,
            'newClientsPerMonth': self.new_clients_per_month,
            'newMRR': self.new_mrr,
            'monthsToGoal': self.months_to_goal,
        }


def round_half_up(value):
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Integers and non-finite floats (inf, nan) come back unchanged.
    """
    if isinstance(value, int) or not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def compute_projection(inputs):
    """Project the sales funnel for one snapshot of inputs.

    Pure function of ``inputs``: no state, no I/O. New MRR is billed on the
    rounded client count so it always matches the "new clients" figure shown
    next to it; ``new_clients_per_month`` itself stays unrounded.
    """

    # Percents to fractions
    view_to_booking_rate = inputs.view_to_booking_rate_pct / 100
    show_rate = inputs.show_rate_pct / 100
    close_rate = inputs.close_rate_pct / 100

    # Price is floored at 1 so a zero or negative price cannot blow up the division
    clients_needed = math.ceil(inputs.target_monthly_revenue / max(1, inputs.price_per_client))

    monthly_reach = inputs.videos_per_month * inputs.avg_views_per_video
    bookings_per_month = monthly_reach * view_to_booking_rate
    shows_per_month = bookings_per_month * show_rate
    new_clients_per_month = shows_per_month * close_rate

    new_mrr = round_half_up(new_clients_per_month) * inputs.price_per_client

    # A vanishing client rate can push the ratio to inf; that is "never" too
    months_to_goal = None
    if new_clients_per_month > 0:
        ratio = clients_needed / new_clients_per_month
        if math.isfinite(ratio):
            months_to_goal = math.ceil(ratio)

    return Projection(
        clients_needed=clients_needed,
        monthly_reach=monthly_reach,
        bookings_per_month=bookings_per_month,
        shows_per_month=shows_per_month,
        new_clients_per_month=new_clients_per_month,
        new_mrr=new_mrr,
        months_to_goal=months_to_goal,
    )
