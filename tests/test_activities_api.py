"""Tests for the /admin/activities endpoint."""

from __future__ import annotations

import sys
from pathlib import Path
from uuid import UUID

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from conftest import MEMBER_SUB, make_api_event, response_body  # noqa: E402
from guide_admin.api.admin import lambda_handler  # noqa: E402
from guide_admin.db.models import Activity  # noqa: E402

ACTIVITIES = '/v1/admin/activities'


def _call(*args, **kwargs):
    response = lambda_handler(make_api_event(*args, **kwargs), None)
    return response['statusCode'], response_body(response)


def _create(data) -> dict:
    status, body = _call('POST', ACTIVITIES, body=data)
    assert status == 201, body
    return body['data']


class TestActivitiesApi:
    """Tests for activities CRUD."""

    def test_create_stores_base_item_and_details(
        self, api_session, admin_profile, activity_form_data, invalidated_tags
    ) -> None:
        created = _create(activity_form_data)

        assert created['type'] == 'activity'
        assert created['category'] == 'water-sports'
        assert created['activity_data'] == {
            'durationHours': 4,
            'includes': ['mask', 'lunch'],
        }
        assert api_session.get(Activity, UUID(created['id'])).category == 'water-sports'
        assert invalidated_tags == ['activities_list', f"activity_{created['id']}"]

    def test_get_returns_view_model(
        self, api_session, admin_profile, activity_form_data
    ) -> None:
        created = _create(activity_form_data)

        status, body = _call('GET', f"{ACTIVITIES}/{created['id']}")

        assert status == 200
        assert body['data']['name'] == 'Reef Snorkelling'
        assert body['data']['activityData']['durationHours'] == 4
        assert body['data']['contactInfo']['email'] == ''

    def test_services_are_not_listed(
        self, api_session, admin_profile, activity_form_data, service_form_data
    ) -> None:
        _create(activity_form_data)
        status, _ = _call('POST', '/v1/admin/services', body=service_form_data)
        assert status == 201

        status, body = _call('GET', ACTIVITIES)

        assert status == 200
        assert [item['name'] for item in body['data']] == ['Reef Snorkelling']

    def test_patch_and_delete(
        self, api_session, admin_profile, activity_form_data
    ) -> None:
        created = _create(activity_form_data)
        path = f"{ACTIVITIES}/{created['id']}"

        status, body = _call('PATCH', path, body={'activityData': {'level': 'easy'}})
        assert status == 200
        assert body['data']['activity_data'] == {
            'durationHours': 4,
            'includes': ['mask', 'lunch'],
            'level': 'easy',
        }

        status, body = _call('DELETE', path)
        assert status == 200
        status, body = _call('GET', path)
        assert status == 404
        assert body['error'] == f"activities not found: {created['id']}"

    def test_requires_admin(self, api_session, member_profile) -> None:
        status, _ = _call('GET', ACTIVITIES, user_sub=MEMBER_SUB)
        assert status == 403
