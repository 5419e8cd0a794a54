"""Tests for category-conditional attribute shaping."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from guide_admin.db.models.enums import (  # noqa: E402
    EstablishmentCategory,
    PartnerSection,
    ServiceCategory,
)
from guide_admin.mappers.attributes import (  # noqa: E402
    PARTNER_ATTRIBUTE_SHAPES,
    expand_partner_attributes,
    has_attribute_fields,
    shape_partner_attributes,
    shape_service_data,
)


class TestShapePartnerAttributes:
    """Tests for shape_partner_attributes."""

    def test_accommodation_example(self) -> None:
        result = shape_partner_attributes(
            PartnerSection.ESTABLISHMENT,
            EstablishmentCategory.ACCOMMODATION,
            {'hasPool': True, 'hasFreeWifi': False, 'roomCount': 5},
        )
        assert result == {
            'accommodationType': 'hotel',
            'rooms': [],
            'facilities': ['Swimming Pool'],
            'policies': {'checkIn': '14:00', 'checkOut': '11:00'},
            'roomCount': 5,
        }

    def test_accommodation_lists_facilities_in_order(self) -> None:
        result = shape_partner_attributes(
            'establishment',
            'accommodation',
            {'hasAirCon': True, 'hasBreakfast': True, 'hasFreeWifi': True, 'hasPool': True},
        )
        assert result['facilities'] == [
            'Swimming Pool',
            'Free WiFi',
            'Breakfast Included',
            'Air Conditioning',
        ]
        assert 'roomCount' not in result

    def test_food_drink_defaults_cuisine(self) -> None:
        result = shape_partner_attributes('establishment', 'food_drink', {})
        assert result == {
            'establishmentType': 'restaurant',
            'cuisine': ['General'],
            'dietaryOptions': [],
            'alcoholServed': False,
        }

    def test_food_drink_with_vegan_options(self) -> None:
        result = shape_partner_attributes(
            'establishment',
            'food_drink',
            {'cuisine': 'Thai', 'hasVeganOptions': True, 'alcoholServed': True},
        )
        assert result['cuisine'] == ['Thai']
        assert result['dietaryOptions'] == ['Vegan Options']
        assert result['alcoholServed'] is True

    def test_transport_provider(self) -> None:
        result = shape_partner_attributes(
            'establishment',
            'transport_provider',
            {'vehicleTypes': ['scooter', 'jeep'], 'requiresLicense': True},
        )
        assert result == {
            'transportType': 'general',
            'vehicles': ['scooter', 'jeep'],
            'requiresLicense': True,
            'services': [],
        }

    def test_health_service(self) -> None:
        result = shape_partner_attributes(
            PartnerSection.SERVICE,
            ServiceCategory.HEALTH,
            {'specialties': 'dental, physio', 'acceptsInsurance': True},
        )
        assert result == {
            'serviceType': 'medical',
            'specialties': ['dental', 'physio'],
            'insurance': {'acceptsInsurance': True},
            'emergency': False,
        }

    @pytest.mark.parametrize(
        ('section', 'category'),
        [
            ('establishment', 'shopping'),
            ('service', 'accommodation'),
            ('service', 'wellness'),
            ('unknown', 'accommodation'),
        ],
    )
    def test_other_combinations_have_no_attributes(self, section, category) -> None:
        assert shape_partner_attributes(section, category, {'hasPool': True}) is None
        assert not has_attribute_fields(section, category)

    def test_is_pure(self) -> None:
        inputs = {'hasPool': True, 'roomCount': 5}
        first = shape_partner_attributes('establishment', 'accommodation', inputs)
        second = shape_partner_attributes('establishment', 'accommodation', inputs)
        assert first == second
        assert first is not second
        assert inputs == {'hasPool': True, 'roomCount': 5}

    def test_lookup_table_is_closed(self) -> None:
        assert set(PARTNER_ATTRIBUTE_SHAPES) == {
            ('establishment', 'accommodation'),
            ('establishment', 'food_drink'),
            ('establishment', 'transport_provider'),
            ('service', 'health'),
        }


class TestExpandPartnerAttributes:
    """Stored attributes expand back into the inputs that produced them."""

    @pytest.mark.parametrize(
        ('section', 'category', 'inputs'),
        [
            (
                'establishment',
                'accommodation',
                {
                    'hasPool': True,
                    'hasFreeWifi': False,
                    'hasBreakfast': True,
                    'hasAirCon': False,
                    'roomCount': 5,
                },
            ),
            (
                'establishment',
                'food_drink',
                {'cuisine': 'Thai', 'hasVeganOptions': True, 'alcoholServed': False},
            ),
            (
                'establishment',
                'transport_provider',
                {'vehicleTypes': ['boat'], 'requiresLicense': False},
            ),
            ('service', 'health', {'specialties': ['dental'], 'acceptsInsurance': True}),
        ],
    )
    def test_expand_inverts_shape(self, section, category, inputs) -> None:
        shaped = shape_partner_attributes(section, category, inputs)
        assert expand_partner_attributes(section, category, shaped) == inputs

    def test_unknown_combination_expands_to_empty(self) -> None:
        assert expand_partner_attributes('establishment', 'culture', {'x': 1}) == {}


class TestShapeServiceData:
    """Tests for shape_service_data."""

    def test_keeps_only_category_keys_with_defaults(self) -> None:
        result = shape_service_data(
            'health',
            {'emergencyService': True, 'emergencyNumber': '1669', 'unknownKey': 1},
        )
        assert result == {
            'emergencyService': True,
            'emergencyNumber': '1669',
            'walkInAccepted': False,
            'services': [],
            'insuranceAccepted': [],
        }

    def test_defaults_are_not_shared(self) -> None:
        first = shape_service_data('wellness', {})
        first['treatments'].append('massage')
        assert shape_service_data('wellness', {})['treatments'] == []

    def test_unknown_category_passes_through(self) -> None:
        raw = {'anything': 'goes'}
        assert shape_service_data('professional', raw) == raw

    def test_accepts_enum_category(self) -> None:
        result = shape_service_data(ServiceCategory.REAL_ESTATE, None)
        assert result == {'yearsInBusiness': 0, 'servicesOffered': []}
