import datetime as dt

import pytest

from clinic.helpers import GenericHelpers, dates, validation
from clinic.serializers.doctor import DoctorSerializer


@pytest.mark.parametrize('value,expected', [
    ('5551234', True),
    (5551234, True),
    ('+34 600-123-456', True),
    ('123', False),
    ('phone', False),
    (None, False),
])
def test_phone_numbers(value, expected):
    assert validation.is_valid_phone_number(value) is expected


def test_email():
    assert validation.is_valid_email('ana@x.com')
    assert not validation.is_valid_email('ana@')
    assert not validation.is_valid_email(None)


def test_strong_password_requires_every_character_class():
    assert validation.is_strong_password('Str0ng!Clinic')
    assert not validation.is_strong_password('Abcdefg12')  # no symbol
    assert not validation.is_strong_password('s!1short')  # no upper case
    assert not validation.is_strong_password('')


def test_url_and_ip():
    assert validation.is_valid_url('https://clinic.example.com/path?q=1')
    assert not validation.is_valid_url('ftp://clinic.example.com')
    assert not validation.is_valid_url('not a url')
    assert validation.is_valid_ip('192.168.0.1')
    assert validation.is_valid_ip('::1')
    assert not validation.is_valid_ip('999.1.1.1')


def test_credit_card_luhn():
    assert validation.is_valid_credit_card('4111 1111 1111 1111')
    assert not validation.is_valid_credit_card('4111111111111112')
    assert not validation.is_valid_credit_card('1234')


def test_identity_number():
    assert validation.is_valid_identity_number(12345678)
    assert not validation.is_valid_identity_number('12ab5678')
    assert not validation.is_valid_identity_number(123)


def test_calculate_age_counts_birthday():
    born = dt.date(2000, 6, 15)
    assert dates.calculate_age(born, today=dt.date(2024, 6, 14)) == 23
    assert dates.calculate_age(born, today=dt.date(2024, 6, 15)) == 24


def test_weekend_and_business_hours():
    assert dates.is_weekend(dt.date(2024, 6, 15))  # Saturday
    assert not dates.is_weekend(dt.date(2024, 6, 17))
    assert dates.is_business_hour(dt.datetime(2024, 6, 17, 9, 0))
    assert not dates.is_business_hour(dt.datetime(2024, 6, 17, 17, 0))
    assert dates.is_business_hour(dt.datetime(2024, 6, 17, 7, 30), start_hour=7, end_hour=12)


def test_timezone_conversion():
    noon_utc = dt.datetime(2024, 1, 1, 12, 0, tzinfo=dt.timezone.utc)
    local = dates.to_local(noon_utc, 'America/Bogota')
    assert local.hour == 7
    assert dates.to_utc(dt.datetime(2024, 1, 1, 7, 0), 'America/Bogota') == noon_utc
    assert dates.current_utc().utcoffset() == dt.timedelta(0)


def test_format_datetime_default_and_custom():
    value = dt.datetime(2024, 1, 2, 3, 4, 5)
    assert dates.format_datetime(value) == '2024-01-02 03:04:05'
    assert dates.format_datetime(value, '%d/%m/%Y') == '02/01/2024'


def test_generic_helpers_validate_reports_serializer_errors():
    helpers = GenericHelpers()
    ok, errors = helpers.validate(DoctorSerializer, {'name': '', 'specialty': 'Cardiology'})
    assert ok is False
    assert 'name' in errors
    assert helpers.validate(DoctorSerializer, {'name': 'Dr. House', 'specialty': 'Diagnostics'}) == (True, None)
    assert helpers.is_valid_phone_number('5551234')
