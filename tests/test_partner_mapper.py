"""Tests for the partner record <-> view-model mapper."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from uuid import uuid4

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from guide_admin.mappers.partners import (  # noqa: E402
    partner_to_record,
    partner_to_view_model,
)

WRITABLE_COLUMNS = (
    'name', 'section', 'main_category', 'subcategory', 'main_image', 'gallery',
    'short_description', 'long_description', 'address', 'latitude', 'longitude',
    'area', 'phone', 'email', 'website', 'line_id', 'social', 'regular_hours',
    'seasonal_changes', 'open_24h', 'rating', 'review_count', 'tags',
    'price_range', 'currency', 'features', 'languages', 'is_sponsored',
    'is_featured', 'sponsor_end_date', 'accessibility', 'payment_options',
    'attributes',
)


@pytest.fixture
def partner_record() -> dict:
    """A well-formed stored partner row."""
    return {
        'id': uuid4(),
        'name': 'Sunrise Bungalows',
        'section': 'establishment',
        'main_category': 'food_drink',
        'subcategory': 'cafe',
        'main_image': 'https://example.com/sunrise.jpg',
        'gallery': ['https://example.com/1.jpg'],
        'short_description': 'Beachfront cafe with sea views.',
        'long_description': 'Open since 1999.',
        'address': '12 Beach Road',
        'latitude': 9.68,
        'longitude': 100.06,
        'area': 'Haad Rin',
        'phone': '+66 77 123 456',
        'email': 'hello@example.com',
        'website': 'https://example.com',
        'line_id': 'sunrise',
        'social': {'facebook': 'sunrise'},
        'regular_hours': '08:00-22:00',
        'seasonal_changes': 'Closed in November',
        'open_24h': False,
        'rating': 4.5,
        'review_count': 12,
        'tags': ['coffee'],
        'price_range': '€€',
        'currency': 'THB',
        'features': ['Sea view'],
        'languages': ['en'],
        'is_sponsored': True,
        'is_featured': False,
        'sponsor_end_date': '2024-06-01',
        'accessibility': {
            'wheelchairAccessible': True,
            'familyFriendly': False,
            'petFriendly': False,
        },
        'payment_options': {
            'cash': True,
            'creditCard': False,
            'mobilePay': True,
            'cryptoCurrency': False,
            'acceptedCards': [],
        },
        'attributes': json.dumps(
            {
                'establishmentType': 'restaurant',
                'cuisine': ['Thai'],
                'dietaryOptions': [],
                'alcoholServed': True,
            },
            separators=(',', ':'),
        ),
    }


class TestPartnerRoundTrip:
    """Mapping a row to the view model and back keeps writable columns."""

    def test_record_survives_round_trip(self, partner_record) -> None:
        record = partner_to_record(partner_to_view_model(partner_record))
        expected = {column: partner_record[column] for column in WRITABLE_COLUMNS}
        assert record == expected


class TestPartnerViewModel:
    """Tests for partner_to_view_model."""

    def test_nests_flat_columns(self, partner_record) -> None:
        view = partner_to_view_model(partner_record)
        assert view['location']['coordinates'] == {'latitude': 9.68, 'longitude': 100.06}
        assert view['contact']['social'] == {
            'facebook': 'sunrise',
            'instagram': '',
            'twitter': '',
        }
        assert view['rating'] == {'score': 4.5, 'reviewCount': 12}
        assert view['promotion']['promotionEndsAt'] == '2024-06-01'
        assert view['attributes']['cuisine'] == ['Thai']

    def test_empty_record_is_fully_defaulted(self) -> None:
        view = partner_to_view_model({})
        assert view['images'] == {'main': '', 'gallery': []}
        assert view['hours']['open24h'] is False
        assert view['paymentOptions']['acceptedCards'] == []
        assert view['attributes'] is None

    def test_malformed_attributes_do_not_raise(self) -> None:
        view = partner_to_view_model({'attributes': '{broken', 'social': 'nope'})
        assert view['attributes'] is None
        assert view['contact']['social']['facebook'] == ''


class TestPartnerToRecord:
    """Tests for partner_to_record."""

    def test_partial_view_gives_partial_record(self) -> None:
        record = partner_to_record({'contact': {'phone': ''}, 'name': 'New'})
        assert record == {'name': 'New', 'phone': None}

    def test_attribute_inputs_are_shaped_for_category(self) -> None:
        record = partner_to_record(
            {
                'section': 'establishment',
                'mainCategory': 'accommodation',
                'attributeInputs': {'hasPool': True, 'roomCount': 5},
                'attributes': {'ignored': True},
            }
        )
        assert json.loads(record['attributes']) == {
            'accommodationType': 'hotel',
            'rooms': [],
            'facilities': ['Swimming Pool'],
            'policies': {'checkIn': '14:00', 'checkOut': '11:00'},
            'roomCount': 5,
        }

    def test_attribute_inputs_for_other_categories_clear_attributes(self) -> None:
        record = partner_to_record(
            {
                'section': 'establishment',
                'mainCategory': 'shopping',
                'attributeInputs': {'hasPool': True},
            }
        )
        assert record['attributes'] is None

    def test_empty_social_values_are_dropped(self) -> None:
        record = partner_to_record(
            {'contact': {'social': {'facebook': 'x', 'instagram': '', 'twitter': None}}}
        )
        assert record['social'] == {'facebook': 'x'}
