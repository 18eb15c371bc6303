"""
Admin API

GET/POST          /api/admin/bookings
GET/PATCH/DELETE  /api/admin/bookings/<id>
GET               /api/admin/clients
GET               /api/admin/clients/<email>/bookings
GET               /api/admin/dashboard
GET/PUT           /api/admin/services
"""

import logging

from flask import request

from clinic.admin import admin_api_bp
from clinic.auth.guard import admin_api_required
from clinic.extensions import db
from clinic.models import Booking
from clinic.responses import success, error
from clinic.services import (
    BookingError,
    create_booking,
    get_bookings,
    update_booking,
    delete_booking,
    get_clients,
    get_client_bookings,
    get_dashboard_stats,
    get_all_services,
    save_services,
)

logger = logging.getLogger(__name__)


@admin_api_bp.route('/bookings', methods=['GET'])
@admin_api_required
def list_bookings():
    try:
        bookings = get_bookings(
            date_from=request.args.get('date_from'),
            date_to=request.args.get('date_to'),
            status=request.args.get('status'),
            search=request.args.get('search'),
        )
        return success([b.to_dict() for b in bookings], total=len(bookings))
    except BookingError as e:
        return error(e.message, e.status)
    except Exception:
        logger.exception('Fetching bookings failed')
        return error('An error occurred while fetching bookings', 500)


@admin_api_bp.route('/bookings', methods=['POST'])
@admin_api_required
def create_admin_booking():
    """Admin-entered booking. Same validation as the public form, but the
    status may be chosen."""
    body = request.get_json(silent=True)
    status = 'confirmed'
    if isinstance(body, dict) and body.get('status'):
        status = body['status']
    try:
        booking = create_booking(body, status=status)
        return success(booking.to_dict())
    except BookingError as e:
        return error(e.message, e.status)
    except Exception:
        logger.exception('Creating booking failed')
        return error('An error occurred while creating the booking', 500)


@admin_api_bp.route('/bookings/<int:booking_id>', methods=['GET'])
@admin_api_required
def get_booking(booking_id):
    booking = db.session.get(Booking, booking_id)
    if booking is None:
        return error('Booking not found', 404)
    return success(booking.to_dict())


@admin_api_bp.route('/bookings/<int:booking_id>', methods=['PATCH'])
@admin_api_required
def patch_booking(booking_id):
    booking = db.session.get(Booking, booking_id)
    if booking is None:
        return error('Booking not found', 404)
    try:
        booking = update_booking(booking, request.get_json(silent=True))
        return success(booking.to_dict())
    except BookingError as e:
        return error(e.message, e.status)
    except Exception:
        logger.exception('Updating booking %s failed', booking_id)
        return error('An error occurred while updating the booking', 500)


@admin_api_bp.route('/bookings/<int:booking_id>', methods=['DELETE'])
@admin_api_required
def remove_booking(booking_id):
    booking = db.session.get(Booking, booking_id)
    if booking is None:
        return error('Booking not found', 404)
    try:
        delete_booking(booking)
        return success(message='Booking deleted')
    except Exception:
        logger.exception('Deleting booking %s failed', booking_id)
        return error('An error occurred while deleting the booking', 500)


@admin_api_bp.route('/clients', methods=['GET'])
@admin_api_required
def list_clients():
    try:
        clients = get_clients()
        return success(clients, total=len(clients))
    except Exception:
        logger.exception('Fetching clients failed')
        return error('An error occurred while fetching clients', 500)


@admin_api_bp.route('/clients/<path:email>/bookings', methods=['GET'])
@admin_api_required
def list_client_bookings(email):
    try:
        bookings = get_client_bookings(email)
        return success([b.to_dict() for b in bookings], total=len(bookings))
    except Exception:
        logger.exception('Fetching bookings for client failed')
        return error('An error occurred while fetching client bookings', 500)


@admin_api_bp.route('/dashboard', methods=['GET'])
@admin_api_required
def dashboard():
    try:
        return success(get_dashboard_stats())
    except Exception:
        logger.exception('Fetching dashboard stats failed')
        return error('An error occurred while fetching statistics', 500)


@admin_api_bp.route('/services', methods=['GET'])
@admin_api_required
def list_all_services():
    """Every service, inactive ones included."""
    services = get_all_services()
    return success([s.to_dict() for s in services], total=len(services))


@admin_api_bp.route('/services', methods=['PUT'])
@admin_api_required
def put_services():
    try:
        services = save_services(request.get_json(silent=True))
        return success([s.to_dict() for s in services], total=len(services))
    except BookingError as e:
        return error(e.message, e.status)
    except Exception:
        logger.exception('Saving services failed')
        return error('An error occurred while saving services', 500)
