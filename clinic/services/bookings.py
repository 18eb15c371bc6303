"""
Booking Service

Validation, creation and querying of bookings.
"""

import logging
import re
from datetime import datetime

from flask import current_app
from sqlalchemy import or_

from clinic.extensions import db
from clinic.models import Booking, Service, BOOKING_STATUSES
from clinic.services.pricing import calculate_price, available_on, is_weekend

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('service_id', 'date', 'time', 'first_name', 'last_name', 'phone', 'email')
UPDATABLE_FIELDS = ('status', 'date', 'time', 'notes')

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_RE = re.compile(r'^(\+48)?[0-9]{9}$')


class BookingError(Exception):
    """Booking request that cannot be fulfilled. Carries the HTTP status."""

    def __init__(self, message, status=400):
        super().__init__(message)
        self.message = message
        self.status = status


def parse_date(value):
    try:
        return datetime.strptime(str(value), '%Y-%m-%d').date()
    except ValueError:
        raise BookingError('Invalid date, expected YYYY-MM-DD')


def parse_time(value):
    try:
        return datetime.strptime(str(value), '%H:%M').strftime('%H:%M')
    except ValueError:
        raise BookingError('Invalid time, expected HH:MM')


def parse_notes(value):
    if value is None:
        return None
    if not isinstance(value, str):
        raise BookingError('Invalid notes')
    if len(value) > 500:
        raise BookingError('Notes may be at most 500 characters')
    return value or None


def normalize_phone(phone):
    return re.sub(r'[\s-]', '', phone)


def get_active_services():
    return Service.query.filter_by(is_active=True).order_by(Service.sort_order, Service.id).all()


def validate_booking_request(body):
    """Check a booking payload and return (service, date, time).

    Raises BookingError with a 400 status for anything the client got wrong.
    """
    if not isinstance(body, dict):
        raise BookingError('Request body must be a JSON object')

    for field in REQUIRED_FIELDS:
        if not body.get(field):
            raise BookingError(f'Missing required field: {field}')

    if not EMAIL_RE.match(str(body['email'])):
        raise BookingError('Invalid email address')

    if not PHONE_RE.match(normalize_phone(str(body['phone']))):
        raise BookingError('Invalid phone number')

    day = parse_date(body['date'])
    time = parse_time(body['time'])
    parse_notes(body.get('notes'))

    try:
        service_id = int(body['service_id'])
    except (TypeError, ValueError):
        service_id = None
    service = db.session.get(Service, service_id) if service_id is not None else None
    if service is None or not service.is_active:
        logger.warning('Booking for unknown or inactive service %r', body['service_id'])
        raise BookingError('Selected service does not exist or is inactive')

    if not available_on(service, day):
        raise BookingError('This service is not available at weekends')

    return service, day, time


def create_booking(body, status='confirmed'):
    """Create a booking from a request payload. Price and duration come
    from the service, anything the client sends for them is ignored."""
    service, day, time = validate_booking_request(body)

    price = calculate_price(service, day)
    logger.info('Price calculated server-side: service=%s date=%s weekend=%s price=%s',
                service.id, day.isoformat(), is_weekend(day), price)

    if price < current_app.config['MIN_PRICE_PLN']:
        logger.error('Price %s below minimum %s for service %s',
                     price, current_app.config['MIN_PRICE_PLN'], service.id)
        raise BookingError('Price calculation error, please contact us', 500)

    if status not in BOOKING_STATUSES:
        raise BookingError(f'Invalid status: {status}')

    booking = Booking(
        service_id=service.id,
        service_type=service.name,
        duration_minutes=service.duration_minutes,
        price_pln=price,
        date=day,
        time=time,
        first_name=str(body['first_name']).strip(),
        last_name=str(body['last_name']).strip(),
        phone=str(body['phone']).strip(),
        email=str(body['email']).strip(),
        notes=parse_notes(body.get('notes')),
        status=status,
    )
    try:
        db.session.add(booking)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info('Booking %s created: service=%s price=%s date=%s time=%s',
                booking.id, service.name, price, booking.date, booking.time)
    return booking


def get_bookings(date_from=None, date_to=None, status=None, search=None):
    """Bookings matching the filters, newest date/time first."""
    query = Booking.query

    if date_from:
        query = query.filter(Booking.date >= parse_date(date_from))
    if date_to:
        query = query.filter(Booking.date <= parse_date(date_to))
    if status and status != 'all':
        query = query.filter(Booking.status == status)
    if search:
        pattern = f'%{search}%'
        query = query.filter(or_(
            Booking.first_name.ilike(pattern),
            Booking.last_name.ilike(pattern),
            Booking.email.ilike(pattern),
            Booking.phone.ilike(pattern),
            Booking.service_type.ilike(pattern),
        ))

    return query.order_by(Booking.date.desc(), Booking.time.desc()).all()


def update_booking(booking, body):
    """Apply the allowed fields of `body` to `booking`."""
    if not isinstance(body, dict):
        raise BookingError('Request body must be a JSON object')

    updates = {field: body[field] for field in UPDATABLE_FIELDS if field in body}
    if not updates:
        raise BookingError('Nothing to update')

    if 'status' in updates and updates['status'] not in BOOKING_STATUSES:
        raise BookingError(f"Invalid status: {updates['status']}")
    if 'time' in updates:
        updates['time'] = parse_time(updates['time'])
    if 'notes' in updates:
        updates['notes'] = parse_notes(updates['notes'])
    if 'date' in updates:
        updates['date'] = parse_date(updates['date'])
        # Moving a booking re-prices it against its service; bookings whose
        # service was removed keep their price.
        service = booking.service
        if service is not None and updates['date'] != booking.date:
            if not available_on(service, updates['date']):
                raise BookingError('This service is not available at weekends')
            updates['price_pln'] = calculate_price(service, updates['date'])

    for field, value in updates.items():
        setattr(booking, field, value)

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return booking


def delete_booking(booking):
    try:
        db.session.delete(booking)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
