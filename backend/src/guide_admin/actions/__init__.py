"""Admin action dispatchers.

Each action checks admin access, validates, writes and invalidates
cached views. Results are plain dicts and actions never raise.
"""

from guide_admin.actions.base import deep_merge
from guide_admin.actions.events import (
    create_event_action,
    get_event_view,
    list_events,
    update_event_action,
    update_event_sponsorship,
)
from guide_admin.actions.guides import (
    create_guide_action,
    delete_guide_action,
    get_guide_view,
    list_guides,
    update_guide_action,
)
from guide_admin.actions.partners import (
    create_partner_action,
    delete_partner_action,
    get_partner_view,
    list_partners,
    update_partner_action,
    update_partner_sponsorship,
)
from guide_admin.actions.users import (
    get_user_view,
    list_users,
    toggle_user_admin_status,
    update_user_profile_action,
)

__all__ = [
    "create_event_action",
    "create_guide_action",
    "create_partner_action",
    "deep_merge",
    "delete_guide_action",
    "delete_partner_action",
    "get_event_view",
    "get_guide_view",
    "get_partner_view",
    "get_user_view",
    "list_events",
    "list_guides",
    "list_partners",
    "list_users",
    "toggle_user_admin_status",
    "update_event_action",
    "update_event_sponsorship",
    "update_guide_action",
    "update_partner_action",
    "update_partner_sponsorship",
    "update_user_profile_action",
]
