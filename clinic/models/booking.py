"""
Booking Model
"""

from datetime import datetime, timezone

from clinic.extensions import db

BOOKING_STATUSES = ('confirmed', 'cancelled', 'completed', 'no_show')


def _utcnow():
    return datetime.now(timezone.utc)


class Booking(db.Model):
    """A client appointment. Service name, duration and price are copied
    from the service at booking time."""
    __tablename__ = 'bookings'

    id = db.Column(db.Integer, primary_key=True)
    service_id = db.Column(db.Integer, db.ForeignKey('services.id'))
    service_type = db.Column(db.String(100), nullable=False)
    duration_minutes = db.Column(db.Integer, nullable=False)
    price_pln = db.Column(db.Integer, nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    time = db.Column(db.String(5), nullable=False)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    email = db.Column(db.String(120), nullable=False, index=True)
    notes = db.Column(db.String(500))
    status = db.Column(db.String(20), nullable=False, default='confirmed')
    created_at = db.Column(db.DateTime, default=_utcnow)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'service_id': self.service_id,
            'service_type': self.service_type,
            'duration_minutes': self.duration_minutes,
            'price_pln': self.price_pln,
            'date': self.date.isoformat(),
            'time': self.time,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'phone': self.phone,
            'email': self.email,
            'notes': self.notes,
            'status': self.status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Booking {self.date} {self.time} {self.email}>'
