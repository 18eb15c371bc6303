"""
Pricing Service

Prices are always computed on the server from the service record.
"""


def is_weekend(day):
    """Saturday or Sunday."""
    return day.weekday() >= 5


def calculate_price(service, day):
    """Weekend price on Saturday/Sunday when the service has one, weekday price otherwise."""
    if is_weekend(day) and service.price_weekend is not None:
        return service.price_weekend
    return service.price_weekday


def available_on(service, day):
    return not is_weekend(day) or service.price_weekend is not None
