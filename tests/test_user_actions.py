"""Tests for the user profile action dispatchers."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from conftest import ADMIN_SUB, MEMBER_SUB  # noqa: E402
from guide_admin.actions import (  # noqa: E402
    get_user_view,
    list_users,
    toggle_user_admin_status,
    update_user_profile_action,
)
from guide_admin.api.admin_auth import Ok, check_admin  # noqa: E402


class TestUpdateUserProfile:
    """Tests for update_user_profile_action."""

    def test_updates_profile_fields(
        self, db_session, admin_profile, member_profile, invalidated_tags
    ) -> None:
        result = update_user_profile_action(
            db_session,
            ADMIN_SUB,
            MEMBER_SUB,
            {'bio': 'Loves the beach', 'privacySettings': {'showLocation': True}},
        )

        assert result == {'success': True, 'userId': MEMBER_SUB}
        view = get_user_view(db_session, ADMIN_SUB, MEMBER_SUB)['data']
        assert view['bio'] == 'Loves the beach'
        assert view['privacySettings']['showLocation'] is True
        assert view['privacySettings']['profileVisibility'] == 'public'
        assert view['interests'] == ['music', 'food']
        assert invalidated_tags == ['users_list', f'user_profile_{MEMBER_SUB}']

    def test_admin_flag_is_ignored(
        self, db_session, admin_profile, member_profile
    ) -> None:
        update_user_profile_action(
            db_session, ADMIN_SUB, MEMBER_SUB, {'isAdmin': True, 'name': 'Renamed'}
        )
        view = get_user_view(db_session, ADMIN_SUB, MEMBER_SUB)['data']
        assert view['name'] == 'Renamed'
        assert view['isAdmin'] is False

    def test_invalid_username(self, db_session, admin_profile, member_profile) -> None:
        result = update_user_profile_action(
            db_session, ADMIN_SUB, MEMBER_SUB, {'username': 'no spaces allowed'}
        )
        assert result['status'] == 400
        assert result['violations'][0]['field'] == 'username'

    def test_unknown_user(self, db_session, admin_profile) -> None:
        result = update_user_profile_action(db_session, ADMIN_SUB, 'ghost', {})
        assert result == {
            'success': False,
            'error': 'User not found: ghost',
            'status': 404,
        }


class TestToggleAdminStatus:
    """Tests for toggle_user_admin_status."""

    def test_grant_admin(
        self, db_session, admin_profile, member_profile, invalidated_tags
    ) -> None:
        result = toggle_user_admin_status(db_session, ADMIN_SUB, MEMBER_SUB, True)

        assert result == {'success': True, 'userId': MEMBER_SUB, 'isAdmin': True}
        assert isinstance(check_admin(db_session, MEMBER_SUB), Ok)
        assert invalidated_tags == [
            f'user_profile_{MEMBER_SUB}',
            f'user_admin_{MEMBER_SUB}',
            'users_list',
        ]

    def test_non_boolean_is_rejected(
        self, db_session, admin_profile, member_profile
    ) -> None:
        result = toggle_user_admin_status(db_session, ADMIN_SUB, MEMBER_SUB, 'yes')
        assert result['status'] == 400
        assert result['violations'] == [
            {'field': 'isAdmin', 'message': 'must be a boolean'}
        ]

    def test_members_cannot_grant(self, db_session, member_profile) -> None:
        result = toggle_user_admin_status(db_session, MEMBER_SUB, MEMBER_SUB, True)
        assert result['status'] == 403

    def test_unknown_user(self, db_session, admin_profile) -> None:
        result = toggle_user_admin_status(db_session, ADMIN_SUB, 'ghost', False)
        assert result['status'] == 404


class TestListUsers:
    """Tests for list_users."""

    def test_lists_all_profiles(
        self, db_session, admin_profile, member_profile
    ) -> None:
        result = list_users(db_session, ADMIN_SUB)
        assert {view['id'] for view in result['data']} == {ADMIN_SUB, MEMBER_SUB}
        assert result['meta']['total'] == 2

    def test_search(self, db_session, admin_profile, member_profile) -> None:
        result = list_users(db_session, ADMIN_SUB, search='member')
        assert [view['id'] for view in result['data']] == [MEMBER_SUB]

    def test_unauthenticated(self, db_session) -> None:
        assert list_users(db_session, None)['status'] == 401
