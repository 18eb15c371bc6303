"""
Site Routes

GET  /              - home page with the price list
GET  /api/services  - active services
POST /api/bookings  - create a booking
"""

import logging

from flask import render_template, request

from clinic.responses import success, error
from clinic.services import BookingError, get_active_services, create_booking
from clinic.site import site_bp

logger = logging.getLogger(__name__)


@site_bp.route('/')
def index():
    """Home page"""
    return render_template('site/index.html', services=get_active_services())


@site_bp.route('/api/services')
def list_services():
    return success([s.to_dict() for s in get_active_services()])


@site_bp.route('/api/bookings', methods=['POST'])
def create_public_booking():
    """Public booking form submission. Status is always `confirmed`."""
    try:
        booking = create_booking(request.get_json(silent=True), status='confirmed')
        return success(booking.to_dict())
    except BookingError as e:
        return error(e.message, e.status)
    except Exception:
        logger.exception('Creating booking failed')
        return error('An error occurred while creating the booking', 500)
