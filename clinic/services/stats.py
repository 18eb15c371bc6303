"""
Admin Statistics

Dashboard figures and the client list, both derived from bookings.
"""

import calendar
from datetime import date, timedelta

from clinic.models import Booking
from clinic.services.bookings import get_bookings

REVENUE_STATUSES = ('confirmed', 'completed')


def get_clients():
    """Group bookings by email into client summaries, most recent visit first."""
    clients = {}

    for booking in get_bookings():
        spent = booking.price_pln if booking.status != 'cancelled' else 0
        client = clients.get(booking.email)

        if client is None:
            clients[booking.email] = {
                'email': booking.email,
                'first_name': booking.first_name,
                'last_name': booking.last_name,
                'phone': booking.phone,
                'visit_count': 1,
                'last_visit': booking.date.isoformat(),
                'total_spent': spent,
            }
            continue

        client['visit_count'] += 1
        client['total_spent'] += spent
        if booking.date.isoformat() > client['last_visit']:
            client['last_visit'] = booking.date.isoformat()
            client['first_name'] = booking.first_name
            client['last_name'] = booking.last_name
            client['phone'] = booking.phone

    return sorted(clients.values(), key=lambda c: c['last_visit'], reverse=True)


def get_client_bookings(email):
    return Booking.query.filter_by(email=email)\
        .order_by(Booking.date.desc(), Booking.time.desc()).all()


def get_dashboard_stats(today=None):
    today = today or date.today()
    week_end = today + timedelta(days=7)
    month_start = today.replace(day=1)
    month_end = today.replace(day=calendar.monthrange(today.year, today.month)[1])

    bookings = get_bookings()
    active = [b for b in bookings if b.status != 'cancelled']

    today_bookings = sorted((b for b in active if b.date == today), key=lambda b: b.time)
    week_bookings = [b for b in active if today <= b.date <= week_end]
    month_revenue = sum(
        b.price_pln for b in bookings
        if month_start <= b.date <= month_end and b.status in REVENUE_STATUSES
    )
    upcoming = sorted(
        (b for b in active if today < b.date <= week_end),
        key=lambda b: (b.date, b.time),
    )[:10]

    return {
        'stats': {
            'todayBookings': len(today_bookings),
            'weekBookings': len(week_bookings),
            'monthRevenue': month_revenue,
            'totalClients': len({b.email for b in bookings}),
        },
        'todayAppointments': [b.to_dict() for b in today_bookings],
        'upcomingAppointments': [b.to_dict() for b in upcoming],
    }
