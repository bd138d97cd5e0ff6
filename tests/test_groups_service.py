from __future__ import annotations

from datetime import datetime

import pytest

from models.group import (
    Group,
    GroupCreate,
    GroupUpdate,
    SubItem,
    SubItemCreate,
    SubItemUpdate,
    group_paid_total,
    group_total,
)
from services import groups_service
from services.errors import GroupNotFoundError, ItemNotFoundError


def _group(store, name="Kitchen Renovation", category="maintenance"):
    return groups_service.create_group(store, GroupCreate(name=name, category=category))


def _item(store, group_id, **overrides):
    fields = {
        "groupId": group_id,
        "description": "Tiles",
        "amount": "100",
        "date": "2024-02-01",
        "status": "unpaid",
    }
    fields.update(overrides)
    return groups_service.create_subitem(store, SubItemCreate(**fields))


def test_create_group_starts_empty_with_timestamp(groups_store):
    group = _group(groups_store)

    assert group.items == []
    assert isinstance(group.created_date, datetime)
    assert group.created_date.tzinfo is not None

    stored = groups_service.get_all_groups(groups_store)
    assert stored == [group]
    assert '"createdDate"' in groups_store.path.read_text(encoding="utf-8")


def test_update_group_keeps_items_and_created_date(groups_store):
    group = _group(groups_store)
    item = _item(groups_store, group.id)

    updated = groups_service.update_group(groups_store, GroupUpdate(id=group.id, name="Bathroom", category="home"))

    assert updated.name == "Bathroom"
    assert updated.category == "home"
    assert updated.created_date == group.created_date
    assert updated.items == [item]
    assert groups_service.get_all_groups(groups_store) == [updated]


def test_update_unknown_group_raises(groups_store):
    with pytest.raises(GroupNotFoundError):
        groups_service.update_group(groups_store, GroupUpdate(id="missing", name="x", category="other"))


def test_delete_group_removes_its_items(groups_store):
    kitchen = _group(groups_store)
    garden = _group(groups_store, name="Garden", category="home")
    _item(groups_store, kitchen.id)

    groups_service.delete_group(groups_store, kitchen.id)

    assert [g.id for g in groups_service.get_all_groups(groups_store)] == [garden.id]


def test_delete_unknown_group_raises(groups_store):
    _group(groups_store)

    with pytest.raises(GroupNotFoundError):
        groups_service.delete_group(groups_store, "missing")


def test_create_subitem_appends_to_group(groups_store):
    group = _group(groups_store)
    first = _item(groups_store, group.id)
    second = _item(groups_store, group.id, description="Sink", amount=250.75, status="paid")

    stored = groups_service.get_all_groups(groups_store)[0]
    assert stored.items == [first, second]
    assert second.amount == 250.75


def test_create_subitem_unknown_group_does_not_touch_store(groups_store):
    _group(groups_store)
    before = groups_store.path.read_text(encoding="utf-8")

    with pytest.raises(GroupNotFoundError):
        _item(groups_store, "missing")

    assert groups_store.path.read_text(encoding="utf-8") == before


def test_update_subitem_full_replacement(groups_store):
    group = _group(groups_store)
    item = _item(groups_store, group.id)

    updated = groups_service.update_subitem(groups_store, SubItemUpdate(
        groupId=group.id,
        id=item.id,
        description="Tiles (imported)",
        amount=140,
        date="2024-02-03",
        status="paid",
    ))

    assert updated.id == item.id
    stored = groups_service.get_all_groups(groups_store)[0].items
    assert stored == [updated]
    assert stored[0].description == "Tiles (imported)"
    assert stored[0].status == "paid"


def test_update_subitem_missing_group_or_item(groups_store):
    group = _group(groups_store)
    item = _item(groups_store, group.id)
    fields = dict(description="x", amount=1, date="2024-01-01", status="paid")

    with pytest.raises(GroupNotFoundError):
        groups_service.update_subitem(groups_store, SubItemUpdate(groupId="missing", id=item.id, **fields))
    with pytest.raises(ItemNotFoundError):
        groups_service.update_subitem(groups_store, SubItemUpdate(groupId=group.id, id="missing", **fields))


def test_delete_subitem(groups_store):
    group = _group(groups_store)
    first = _item(groups_store, group.id)
    second = _item(groups_store, group.id, description="Grout")

    groups_service.delete_subitem(groups_store, group.id, first.id)

    assert groups_service.get_all_groups(groups_store)[0].items == [second]


def test_delete_subitem_missing_group_or_item(groups_store):
    group = _group(groups_store)
    item = _item(groups_store, group.id)

    with pytest.raises(GroupNotFoundError):
        groups_service.delete_subitem(groups_store, "missing", item.id)
    with pytest.raises(ItemNotFoundError):
        groups_service.delete_subitem(groups_store, group.id, "missing")


def test_subitem_ids_are_scoped_to_their_group(groups_store):
    kitchen = _group(groups_store)
    garden = _group(groups_store, name="Garden")
    item = _item(groups_store, kitchen.id)

    with pytest.raises(ItemNotFoundError):
        groups_service.delete_subitem(groups_store, garden.id, item.id)


def test_group_totals_scenario():
    group = Group(
        id="g1",
        name="Kitchen Renovation",
        category="maintenance",
        createdDate="2024-01-01T00:00:00Z",
        items=[
            SubItem(id="1", description="Tiles", amount=100, date="2024-01-02", status="unpaid"),
            SubItem(id="2", description="Sink", amount=200, date="2024-01-03", status="paid"),
        ],
    )

    assert group_total(group) == 300
    assert group_paid_total(group) == 200


def test_group_totals_empty_group_are_zero():
    group = Group(id="g1", name="Empty", category="other", createdDate="2024-01-01T00:00:00Z")

    assert group_total(group) == 0
    assert group_paid_total(group) == 0


def test_get_group_totals_is_derived_from_items(groups_store):
    group = _group(groups_store)
    _item(groups_store, group.id, amount=100, status="unpaid")
    _item(groups_store, group.id, amount=200, status="paid")

    [totals] = groups_service.get_group_totals(groups_store)

    assert totals.id == group.id
    assert totals.item_count == 2
    assert totals.total == 300
    assert totals.paid_total == 200
    assert totals.unpaid_total == 100
    assert "total" not in groups_store.path.read_text(encoding="utf-8").lower()
