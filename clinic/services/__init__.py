"""
Services Package

Exports all services for easy importing.
"""

from clinic.services.pricing import calculate_price, is_weekend, available_on
from clinic.services.bookings import (
    BookingError,
    get_active_services,
    create_booking,
    get_bookings,
    update_booking,
    delete_booking,
)
from clinic.services.stats import get_clients, get_client_bookings, get_dashboard_stats
from clinic.services.catalog import get_all_services, save_services

__all__ = [
    'calculate_price',
    'is_weekend',
    'available_on',
    'BookingError',
    'get_active_services',
    'create_booking',
    'get_bookings',
    'update_booking',
    'delete_booking',
    'get_clients',
    'get_client_bookings',
    'get_dashboard_stats',
    'get_all_services',
    'save_services',
]
