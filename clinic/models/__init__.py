"""
Models Package

Exports all models for easy importing.
"""

from clinic.models.service import Service
from clinic.models.booking import Booking, BOOKING_STATUSES

__all__ = ['Service', 'Booking', 'BOOKING_STATUSES']
