"""
Admin Routes

Server-rendered admin pages. Access control happens in the session
guard before any of these run.
"""

from flask import render_template, request

from clinic.admin import admin_bp
from clinic.models import BOOKING_STATUSES
from clinic.services import BookingError, get_bookings, get_clients, get_dashboard_stats


@admin_bp.route('/login')
def admin_login():
    """PIN login page. The form posts to the auth API and then follows `redirect`."""
    next_url = request.args.get('redirect', '')
    if not next_url.startswith('/admin'):
        next_url = '/admin'
    return render_template('admin/login.html', next_url=next_url)


@admin_bp.route('')
@admin_bp.route('/dashboard')
def admin_dashboard():
    """Admin landing page with today's and upcoming appointments."""
    return render_template('admin/dashboard.html', **get_dashboard_stats())


@admin_bp.route('/bookings')
def admin_bookings():
    filters = {
        'date_from': request.args.get('date_from') or None,
        'date_to': request.args.get('date_to') or None,
        'status': request.args.get('status') or None,
        'search': request.args.get('search') or None,
    }
    try:
        bookings = get_bookings(**filters)
    except BookingError:
        # Bad date filter in the query string; show everything instead
        bookings = get_bookings()
    return render_template('admin/bookings.html',
                           bookings=bookings,
                           filters=filters,
                           statuses=BOOKING_STATUSES)


@admin_bp.route('/clients')
def admin_clients():
    return render_template('admin/clients.html', clients=get_clients())
