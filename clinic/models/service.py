"""
Service Model
"""

from clinic.extensions import db


class Service(db.Model):
    """A bookable treatment with weekday and weekend prices"""
    __tablename__ = 'services'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(500))
    duration_minutes = db.Column(db.Integer, nullable=False, default=60)
    price_weekday = db.Column(db.Integer, nullable=False)
    # NULL means the service is not offered at weekends
    price_weekend = db.Column(db.Integer)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    # Relationship to bookings
    bookings = db.relationship('Booking', backref='service', lazy=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'duration_minutes': self.duration_minutes,
            'price_weekday': self.price_weekday,
            'price_weekend': self.price_weekend,
            'is_active': self.is_active,
            'sort_order': self.sort_order,
        }

    def __repr__(self):
        return f'<Service {self.name}>'
