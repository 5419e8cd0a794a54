"""Resource configuration for base item CRUD."""

from __future__ import annotations

from guide_admin.api.admin_crud import ResourceConfig
from guide_admin.db.repositories import ActivityRepository, ServiceRepository
from guide_admin.mappers import (
    activity_to_record,
    activity_to_response,
    activity_to_view_model,
    service_to_record,
    service_to_response,
    service_to_view_model,
)
from guide_admin.schemas import ActivityForm, ServiceForm

_RESOURCE_CONFIG = {
    "services": ResourceConfig(
        name="services",
        entity="service",
        repository_class=ServiceRepository,
        form=ServiceForm,
        to_view_model=service_to_view_model,
        to_record=service_to_record,
        to_response=service_to_response,
    ),
    "activities": ResourceConfig(
        name="activities",
        entity="activity",
        repository_class=ActivityRepository,
        form=ActivityForm,
        to_view_model=activity_to_view_model,
        to_record=activity_to_record,
        to_response=activity_to_response,
    ),
}


def get_resource_config(name: str) -> ResourceConfig:
    return _RESOURCE_CONFIG[name]
