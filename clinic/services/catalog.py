"""
Service Catalog

Admin editing of the treatment list and its prices.
"""

import logging

from flask import current_app

from clinic.extensions import db
from clinic.models import Service
from clinic.services.bookings import BookingError

logger = logging.getLogger(__name__)

MIN_DURATION = 15
MAX_DURATION = 240


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_service(data):
    """Return a list of problems with one service entry (empty when valid)."""
    if not isinstance(data, dict):
        return ['Each service must be a JSON object']

    errors = []
    min_price = current_app.config['MIN_PRICE_PLN']
    name = data.get('name')
    label = name if isinstance(name, str) and name.strip() else '?'

    if not isinstance(name, str) or not name.strip():
        errors.append('Service name is required')
    elif len(name.strip()) > 100:
        errors.append(f'Name too long for service {label}')

    duration = data.get('duration_minutes')
    if not _is_int(duration) or not MIN_DURATION <= duration <= MAX_DURATION:
        errors.append(f'Invalid duration for service {label}')

    price_weekday = data.get('price_weekday')
    if not _is_int(price_weekday) or price_weekday < min_price:
        errors.append(f'Invalid weekday price for service {label}')

    price_weekend = data.get('price_weekend')
    if price_weekend is not None and (not _is_int(price_weekend) or price_weekend < min_price):
        errors.append(f'Invalid weekend price for service {label}')

    if not isinstance(data.get('is_active', True), bool):
        errors.append(f'Invalid active flag for service {label}')

    description = data.get('description')
    if description is not None and (not isinstance(description, str) or len(description) > 500):
        errors.append(f'Invalid description for service {label}')

    if 'sort_order' in data and not _is_int(data['sort_order']):
        errors.append(f'Invalid sort order for service {label}')

    if 'id' in data and not _is_int(data['id']):
        errors.append(f'Invalid id for service {label}')

    return errors


def get_all_services():
    return Service.query.order_by(Service.sort_order, Service.id).all()


def save_services(body):
    """Update existing services (entries with an `id`) and add new ones.

    Every entry is validated before anything is written; services missing
    from the payload are left as they are.
    """
    if not isinstance(body, dict) or not isinstance(body.get('services'), list):
        raise BookingError('Request body must contain a `services` list')

    entries = body['services']
    errors = []
    for entry in entries:
        errors.extend(validate_service(entry))
    if errors:
        raise BookingError('; '.join(errors))

    targets = []
    for entry in entries:
        if 'id' in entry:
            service = db.session.get(Service, entry['id'])
            if service is None:
                raise BookingError(f"Service {entry['id']} does not exist", 404)
        else:
            service = Service()
        targets.append((service, entry))

    try:
        for service, entry in targets:
            service.name = entry['name'].strip()
            service.duration_minutes = entry['duration_minutes']
            service.price_weekday = entry['price_weekday']
            service.price_weekend = entry.get('price_weekend')
            service.is_active = entry.get('is_active', True)
            service.description = entry.get('description')
            if 'sort_order' in entry:
                service.sort_order = entry['sort_order']
            db.session.add(service)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info('Saved %d services', len(targets))
    return get_all_services()
