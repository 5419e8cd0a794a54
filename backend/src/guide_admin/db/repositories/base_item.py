"""Repositories for items stored as base items plus details rows."""

from __future__ import annotations

from typing import Any, Optional, Type

from sqlalchemy import Select, select
from sqlalchemy.orm import Session, selectinload

from guide_admin.db.base import Base
from guide_admin.db.models import Activity, BaseItem, Service
from guide_admin.db.repositories.base import BaseRepository


class BaseItemRepository(BaseRepository[BaseItem]):
    """Repository for one kind of base item.

    Entities are ``BaseItem`` rows of ``item_type`` with their details
    row (``details_model``, reached through ``details_attr``) loaded.
    Subclasses set the three class attributes.
    """

    item_type: str = ""
    details_model: Type[Base]
    details_attr: str = ""
    search_columns = ("name", "short_description", "long_description", "address")

    def __init__(self, session: Session):
        super().__init__(session, BaseItem)
        self._category: Optional[str] = None

    def get_by_id(self, entity_id: Any) -> Optional[BaseItem]:
        query = self._base_query().where(BaseItem.id == entity_id)
        return self._session.execute(query).scalar_one_or_none()

    def for_category(self, category: Optional[str]) -> "BaseItemRepository":
        """Restrict listings to one details category."""
        self._category = category or None
        return self

    def details(self, item: BaseItem) -> Any:
        return getattr(item, self.details_attr)

    def create_item(
        self,
        item_fields: dict[str, Any],
        detail_fields: dict[str, Any],
    ) -> BaseItem:
        """Insert the base item and its details row in one flush."""
        item_columns = set(BaseItem.__table__.columns.keys())
        item = BaseItem(
            **{k: v for k, v in item_fields.items() if k in item_columns},
        )
        item.type = self.item_type
        details = self.details_model(**self._details(detail_fields))
        setattr(item, self.details_attr, details)
        return self.create(item)

    def update_item(
        self,
        item: BaseItem,
        item_fields: dict[str, Any],
        detail_fields: dict[str, Any],
    ) -> BaseItem:
        """Apply changes to the base item and its details row."""
        details = self.details(item)
        if details is None:
            details = self.details_model(category=detail_fields.get("category") or "")
            setattr(item, self.details_attr, details)
        for key, value in self._details(detail_fields).items():
            setattr(details, key, value)
        return self.apply_changes(item, item_fields)

    def _details(self, fields: dict[str, Any]) -> dict[str, Any]:
        columns = set(self.details_model.__table__.columns.keys())
        return {k: v for k, v in fields.items() if k in columns and k != "id"}

    def _base_query(self) -> Select:
        model = self.details_model
        query = (
            select(BaseItem)
            .join(model, model.id == BaseItem.id)
            .where(BaseItem.type == self.item_type)
            .options(selectinload(getattr(BaseItem, self.details_attr)))
        )
        if self._category:
            query = query.where(model.category == self._category)
        return query


class ServiceRepository(BaseItemRepository):
    """Base items of type "service" with their ``Service`` details."""

    item_type = "service"
    details_model = Service
    details_attr = "service"


class ActivityRepository(BaseItemRepository):
    """Base items of type "activity" with their ``Activity`` details."""

    item_type = "activity"
    details_model = Activity
    details_attr = "activity"
