from datetime import date

import pytest

from clinic.extensions import db
from clinic.models import Booking, Service
from clinic.services import calculate_price, get_dashboard_stats, get_clients

# 2030-01-07 is a Monday, 2030-01-05 a Saturday
MONDAY = '2030-01-07'
SATURDAY = '2030-01-05'


def booking_payload(**overrides):
    payload = {
        'service_id': 1,
        'date': MONDAY,
        'time': '10:00',
        'first_name': 'Anna',
        'last_name': 'Nowak',
        'phone': '600 100 200',
        'email': 'anna@example.com',
    }
    payload.update(overrides)
    return payload


def add_booking(**fields):
    data = {
        'service_type': 'Manual therapy',
        'duration_minutes': 60,
        'price_pln': 200,
        'date': date(2030, 1, 7),
        'time': '10:00',
        'first_name': 'Anna',
        'last_name': 'Nowak',
        'phone': '600100200',
        'email': 'anna@example.com',
        'status': 'confirmed',
    }
    data.update(fields)
    booking = Booking(**data)
    db.session.add(booking)
    db.session.commit()
    return booking


# ---- Pricing ----

def test_weekend_price_used_on_saturday(app):
    service = db.session.get(Service, 1)
    assert calculate_price(service, date(2030, 1, 5)) == service.price_weekend
    assert calculate_price(service, date(2030, 1, 7)) == service.price_weekday


def test_weekday_price_when_no_weekend_price():
    service = Service(name='x', price_weekday=120, price_weekend=None)
    assert calculate_price(service, date(2030, 1, 6)) == 120


# ---- Public API ----

def test_list_services(client):
    r = client.get('/api/services')
    assert r.status_code == 200
    data = r.get_json()
    assert data['success'] is True
    assert {s['name'] for s in data['data']} >= {'Manual therapy', 'Consultation'}


def test_create_booking_computes_price_server_side(client):
    r = client.post('/api/bookings', json=booking_payload(price_pln=1, duration_minutes=5))
    assert r.status_code == 200
    data = r.get_json()['data']
    assert data['price_pln'] == 200
    assert data['duration_minutes'] == 60
    assert data['service_type'] == 'Manual therapy'
    assert data['status'] == 'confirmed'
    assert Booking.query.count() == 1


def test_create_booking_weekend_price(client):
    r = client.post('/api/bookings', json=booking_payload(date=SATURDAY))
    assert r.status_code == 200
    assert r.get_json()['data']['price_pln'] == 250


def test_public_booking_ignores_status(client):
    r = client.post('/api/bookings', json=booking_payload(status='cancelled'))
    assert r.get_json()['data']['status'] == 'confirmed'


@pytest.mark.parametrize('field', ['service_id', 'date', 'time', 'first_name', 'last_name', 'phone', 'email'])
def test_create_booking_missing_field(client, field):
    payload = booking_payload()
    del payload[field]
    r = client.post('/api/bookings', json=payload)
    assert r.status_code == 400
    assert field in r.get_json()['error']


@pytest.mark.parametrize('overrides', [
    {'email': 'not-an-email'},
    {'phone': '12345'},
    {'phone': '+49600100200'},
    {'date': '07.01.2030'},
    {'time': '25:00'},
    {'service_id': 999},
    {'service_id': 'abc'},
    {'service_id': 3, 'date': SATURDAY},
])
def test_create_booking_rejects_bad_input(client, overrides):
    r = client.post('/api/bookings', json=booking_payload(**overrides))
    assert r.status_code == 400
    assert r.get_json()['success'] is False
    assert Booking.query.count() == 0


def test_create_booking_accepts_polish_prefix(client):
    r = client.post('/api/bookings', json=booking_payload(phone='+48 600-100-200'))
    assert r.status_code == 200


def test_inactive_service_cannot_be_booked(client):
    service = db.session.get(Service, 1)
    service.is_active = False
    db.session.commit()
    r = client.post('/api/bookings', json=booking_payload())
    assert r.status_code == 400


def test_price_below_minimum_is_server_error(client):
    db.session.add(Service(id=50, name='Broken', price_weekday=10, duration_minutes=30))
    db.session.commit()
    r = client.post('/api/bookings', json=booking_payload(service_id=50))
    assert r.status_code == 500
    assert Booking.query.count() == 0


def test_create_booking_without_body(client):
    r = client.post('/api/bookings', data='nope', content_type='text/plain')
    assert r.status_code == 400


def test_unknown_api_path_uses_envelope(client):
    r = client.get('/api/nothing-here')
    assert r.status_code == 404
    assert r.get_json() == {'success': False, 'error': 'Not found'}


# ---- Admin API ----

@pytest.mark.parametrize('method,path', [
    ('get', '/api/admin/bookings'),
    ('post', '/api/admin/bookings'),
    ('get', '/api/admin/bookings/1'),
    ('patch', '/api/admin/bookings/1'),
    ('delete', '/api/admin/bookings/1'),
    ('get', '/api/admin/clients'),
    ('get', '/api/admin/clients/anna@example.com/bookings'),
    ('get', '/api/admin/dashboard'),
    ('get', '/api/admin/services'),
    ('put', '/api/admin/services'),
])
def test_admin_api_requires_cookie(client, method, path):
    r = getattr(client, method)(path)
    assert r.status_code == 401
    assert r.get_json()['success'] is False


def test_admin_list_bookings_with_filters(admin_client):
    add_booking(date=date(2030, 1, 7), time='09:00')
    add_booking(date=date(2030, 1, 8), time='12:00', email='jan@example.com',
                first_name='Jan', last_name='Kowalski', status='cancelled')
    add_booking(date=date(2030, 2, 1), time='08:00', service_type='Consultation')

    r = admin_client.get('/api/admin/bookings')
    data = r.get_json()
    assert data['total'] == 3
    assert [b['date'] for b in data['data']] == ['2030-02-01', '2030-01-08', '2030-01-07']

    r = admin_client.get('/api/admin/bookings?date_from=2030-01-08&date_to=2030-01-31')
    assert [b['email'] for b in r.get_json()['data']] == ['jan@example.com']

    r = admin_client.get('/api/admin/bookings?status=cancelled')
    assert r.get_json()['total'] == 1

    r = admin_client.get('/api/admin/bookings?status=all')
    assert r.get_json()['total'] == 3

    r = admin_client.get('/api/admin/bookings?search=KOWAL')
    assert r.get_json()['total'] == 1

    r = admin_client.get('/api/admin/bookings?search=consult')
    assert r.get_json()['total'] == 1

    r = admin_client.get('/api/admin/bookings?date_from=yesterday')
    assert r.status_code == 400


def test_admin_create_booking_with_status(admin_client):
    r = admin_client.post('/api/admin/bookings', json=booking_payload(status='completed'))
    assert r.status_code == 200
    assert r.get_json()['data']['status'] == 'completed'

    r = admin_client.post('/api/admin/bookings', json=booking_payload(status='lost'))
    assert r.status_code == 400


def test_admin_get_booking(admin_client):
    booking = add_booking()
    r = admin_client.get(f'/api/admin/bookings/{booking.id}')
    assert r.status_code == 200
    assert r.get_json()['data']['email'] == 'anna@example.com'

    assert admin_client.get('/api/admin/bookings/9999').status_code == 404


def test_admin_update_booking(admin_client):
    booking = add_booking()
    r = admin_client.patch(f'/api/admin/bookings/{booking.id}',
                           json={'status': 'completed', 'notes': 'left knee', 'price_pln': 1})
    assert r.status_code == 200
    data = r.get_json()['data']
    assert data['status'] == 'completed'
    assert data['notes'] == 'left knee'
    assert data['price_pln'] == 200


def test_admin_update_booking_errors(admin_client):
    booking = add_booking()
    assert admin_client.patch(f'/api/admin/bookings/{booking.id}', json={}).status_code == 400
    assert admin_client.patch(f'/api/admin/bookings/{booking.id}', json={'status': 'maybe'}).status_code == 400
    assert admin_client.patch(f'/api/admin/bookings/{booking.id}', json={'date': '2030/01/01'}).status_code == 400
    assert admin_client.patch('/api/admin/bookings/9999', json={'status': 'completed'}).status_code == 404


def test_admin_delete_booking(admin_client):
    booking = add_booking()
    booking_id = booking.id
    r = admin_client.delete(f'/api/admin/bookings/{booking_id}')
    assert r.status_code == 200
    assert db.session.get(Booking, booking_id) is None
    assert admin_client.delete(f'/api/admin/bookings/{booking_id}').status_code == 404


# ---- Clients and dashboard ----

def test_clients_are_grouped_by_email(app):
    add_booking(date=date(2030, 1, 7), price_pln=200)
    add_booking(date=date(2030, 1, 14), price_pln=180, phone='600999888')
    add_booking(date=date(2030, 1, 21), price_pln=250, status='cancelled')
    add_booking(date=date(2030, 1, 1), email='jan@example.com', first_name='Jan', price_pln=100)

    clients = get_clients()
    assert [c['email'] for c in clients] == ['anna@example.com', 'jan@example.com']
    anna = clients[0]
    assert anna['visit_count'] == 3
    assert anna['total_spent'] == 380
    assert anna['last_visit'] == '2030-01-21'


def test_client_bookings_endpoint(admin_client):
    add_booking(date=date(2030, 1, 7))
    add_booking(date=date(2030, 1, 9))
    add_booking(email='jan@example.com')
    r = admin_client.get('/api/admin/clients/anna@example.com/bookings')
    data = r.get_json()
    assert data['total'] == 2
    assert data['data'][0]['date'] == '2030-01-09'

    r = admin_client.get('/api/admin/clients')
    assert r.get_json()['total'] == 2


def test_dashboard_stats(app):
    add_booking(date=date(2030, 1, 7), time='15:00', price_pln=200)
    add_booking(date=date(2030, 1, 7), time='09:00', price_pln=180, status='completed')
    add_booking(date=date(2030, 1, 7), time='11:00', status='cancelled')
    add_booking(date=date(2030, 1, 10), price_pln=250, email='jan@example.com')
    add_booking(date=date(2030, 1, 20), price_pln=100, status='no_show')
    add_booking(date=date(2030, 2, 3), price_pln=300)

    result = get_dashboard_stats(today=date(2030, 1, 7))
    assert result['stats'] == {
        'todayBookings': 2,
        'weekBookings': 3,
        'monthRevenue': 630,
        'totalClients': 2,
    }
    assert [b['time'] for b in result['todayAppointments']] == ['09:00', '15:00']
    assert [b['date'] for b in result['upcomingAppointments']] == ['2030-01-10']


def test_dashboard_endpoint(admin_client):
    r = admin_client.get('/api/admin/dashboard')
    assert r.status_code == 200
    assert set(r.get_json()['data']) == {'stats', 'todayAppointments', 'upcomingAppointments'}


# ---- Notes, service keys and re-pricing ----

@pytest.mark.parametrize('notes', [{'x': 1}, [1], 42, 'x' * 501])
def test_booking_rejects_invalid_notes(client, admin_client, notes):
    r = client.post('/api/bookings', json=booking_payload(notes=notes))
    assert r.status_code == 400
    assert r.get_json()['success'] is False

    r = admin_client.post('/api/admin/bookings', json=booking_payload(notes=notes))
    assert r.status_code == 400
    assert Booking.query.count() == 0


def test_booking_blank_notes_stored_as_null(client):
    r = client.post('/api/bookings', json=booking_payload(notes=''))
    assert r.status_code == 200
    assert r.get_json()['data']['notes'] is None


def test_admin_update_rejects_invalid_notes(admin_client):
    booking = add_booking(notes='first visit')
    r = admin_client.patch(f'/api/admin/bookings/{booking.id}', json={'notes': {'x': 1}})
    assert r.status_code == 400
    assert r.get_json()['error'] == 'Invalid notes'
    assert db.session.get(Booking, booking.id).notes == 'first visit'


def test_service_json_uses_snake_case(client):
    r = client.get('/api/services')
    service = r.get_json()['data'][0]
    assert {'duration_minutes', 'price_weekday', 'price_weekend', 'is_active', 'sort_order'} <= set(service)
    assert 'priceWeekday' not in service
    assert 'durationMinutes' not in service


def test_booking_remembers_its_service(client):
    r = client.post('/api/bookings', json=booking_payload(service_id=4))
    assert r.get_json()['data']['service_id'] == 4


def test_moving_booking_to_weekend_reprices_it(admin_client):
    r = admin_client.post('/api/admin/bookings', json=booking_payload())
    booking = r.get_json()['data']
    assert booking['price_pln'] == 200

    r = admin_client.patch(f"/api/admin/bookings/{booking['id']}", json={'date': SATURDAY})
    assert r.status_code == 200
    assert r.get_json()['data']['price_pln'] == 250

    r = admin_client.patch(f"/api/admin/bookings/{booking['id']}", json={'date': MONDAY, 'price_pln': 1})
    assert r.get_json()['data']['price_pln'] == 200


def test_moving_weekday_only_service_to_weekend_is_rejected(admin_client):
    r = admin_client.post('/api/admin/bookings', json=booking_payload(service_id=3))
    booking_id = r.get_json()['data']['id']

    r = admin_client.patch(f'/api/admin/bookings/{booking_id}', json={'date': SATURDAY})
    assert r.status_code == 400
    stored = db.session.get(Booking, booking_id)
    assert stored.date == date(2030, 1, 7)
    assert stored.price_pln == 250


def test_booking_without_service_keeps_price_when_moved(admin_client):
    booking = add_booking(price_pln=180)
    r = admin_client.patch(f'/api/admin/bookings/{booking.id}', json={'date': SATURDAY})
    assert r.status_code == 200
    data = r.get_json()['data']
    assert data['date'] == SATURDAY
    assert data['price_pln'] == 180
