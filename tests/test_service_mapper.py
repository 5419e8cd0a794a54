"""Tests for the service and profile mappers."""

from __future__ import annotations

import json
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from guide_admin.db.models import BaseItem, Service  # noqa: E402
from guide_admin.mappers.profiles import (  # noqa: E402
    NOTIFICATION_KEYS,
    profile_to_record,
    profile_to_view_model,
)
from guide_admin.mappers.services import (  # noqa: E402
    service_record,
    service_to_record,
    service_to_response,
    service_to_view_model,
)


def _service_item() -> BaseItem:
    item = BaseItem(
        type='service',
        name='Island Clinic',
        short_description='Walk-in clinic near the pier.',
        address='1 Pier Road',
        coordinates={'latitude': 9.7, 'longitude': 100.0},
        contact_info='{"phone": "+66 77 000 000"}',
        gallery_images=['https://example.com/a.jpg'],
        open_24h=True,
    )
    item.service = Service(
        category='health',
        subcategory='clinic',
        service_data='{"emergencyService": true, "legacy": 1}',
    )
    return item


class TestServiceMapper:
    """Tests for service mapping."""

    def test_service_record_merges_details(self) -> None:
        record = service_record(_service_item())
        assert record['name'] == 'Island Clinic'
        assert record['category'] == 'health'
        assert record['subcategory'] == 'clinic'

    def test_view_model_shapes_service_data(self) -> None:
        view = service_to_view_model(_service_item())
        assert view['serviceData'] == {
            'emergencyService': True,
            'emergencyNumber': '',
            'walkInAccepted': False,
            'services': [],
            'insuranceAccepted': [],
        }
        assert view['contactInfo']['phone'] == '+66 77 000 000'
        assert view['contactInfo']['email'] == ''
        assert view['open24h'] is True
        assert view['paymentMethods'] == {'cash': False, 'card': False, 'mobilePay': False}

    def test_response_decodes_json_columns(self) -> None:
        response = service_to_response(_service_item())
        assert response['contact_info'] == {'phone': '+66 77 000 000'}
        assert response['service_data'] == {'emergencyService': True, 'legacy': 1}
        assert response['gallery_images'] == ['https://example.com/a.jpg']

    def test_to_record_is_partial(self) -> None:
        assert service_to_record({'name': ' Clinic '}) == {'name': 'Clinic'}

    def test_to_record_shapes_service_data_for_current_category(self) -> None:
        record = service_to_record(
            {'serviceData': {'treatments': ['massage'], 'other': True}},
            category='wellness',
        )
        assert json.loads(record['service_data']) == {
            'treatments': ['massage'],
            'specialties': [],
            'bookingRequired': False,
        }

    def test_to_record_drops_empty_contact_values(self) -> None:
        record = service_to_record({'contactInfo': {'phone': '', 'email': 'a@b.co'}})
        assert record['contact_info'] == {'email': 'a@b.co'}


class TestProfileMapper:
    """Tests for profile mapping."""

    def test_view_model_defaults(self) -> None:
        view = profile_to_view_model({'id': 'user-1'})
        assert view['id'] == 'user-1'
        assert view['isAdmin'] is False
        assert view['interests'] == []
        assert view['privacySettings']['profileVisibility'] == 'public'
        assert view['notifications'] == {key: False for key in NOTIFICATION_KEYS}

    def test_to_record_never_writes_admin_flag(self) -> None:
        record = profile_to_record({'isAdmin': True, 'name': 'Someone'})
        assert record == {'name': 'Someone'}

    def test_empty_text_is_written_as_null(self) -> None:
        assert profile_to_record({'bio': ''}) == {'bio': None}

    def test_malformed_preferences_do_not_raise(self) -> None:
        view = profile_to_view_model({'preferences': '{broken'})
        assert view['preferences']['eventCategories'] == []
        assert view['preferences']['accessibility']['wheelchair'] is False
