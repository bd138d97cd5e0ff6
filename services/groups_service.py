"""Service layer for expense groups and the sub-items nested inside them."""
import logging
from datetime import datetime, timezone
from typing import List

from models.group import (
    Group,
    GroupCreate,
    GroupTotals,
    GroupUpdate,
    SubItem,
    SubItemCreate,
    SubItemUpdate,
    group_paid_total,
    group_total,
)
from services.document_store import DocumentStore, find_index
from services.errors import GroupNotFoundError, ItemNotFoundError
from utils.ids import new_id

logger = logging.getLogger(__name__)


def _require_group(groups: List[Group], group_id: str) -> Group:
    index = find_index(groups, group_id)
    if index == -1:
        logger.warning(f"Group {group_id} not found.")
        raise GroupNotFoundError(group_id)
    return groups[index]


# --- Groups ---

def get_all_groups(store: DocumentStore[Group]) -> List[Group]:
    groups = store.read_all()
    logger.info(f"Fetched {len(groups)} groups from '{store.name}'.")
    return groups


def create_group(store: DocumentStore[Group], data: GroupCreate) -> Group:
    """Appends an empty group stamped with the current UTC time."""
    groups = store.read_all()
    group = Group(
        id=new_id(),
        name=data.name,
        category=data.category,
        items=[],
        created_date=datetime.now(timezone.utc),
    )
    groups.append(group)
    store.write_all(groups)
    logger.info(f"Created group {group.id} ({group.name}).")
    return group


def update_group(store: DocumentStore[Group], data: GroupUpdate) -> Group:
    """Replaces name and category only; items and createdDate are kept."""
    groups = store.read_all()
    group = _require_group(groups, data.id)
    group.name = data.name
    group.category = data.category
    store.write_all(groups)
    logger.info(f"Updated group {group.id}.")
    return group


def delete_group(store: DocumentStore[Group], group_id: str) -> None:
    """Removes the group together with all of its sub-items."""
    groups = store.read_all()
    remaining = [group for group in groups if group.id != group_id]
    if len(remaining) == len(groups):
        logger.warning(f"Delete rejected: group {group_id} not found.")
        raise GroupNotFoundError(group_id)

    store.write_all(remaining)
    logger.info(f"Deleted group {group_id}.")


def get_group_totals(store: DocumentStore[Group]) -> List[GroupTotals]:
    """Per-group totals computed from the current items; nothing is cached."""
    totals = []
    for group in store.read_all():
        total = group_total(group)
        paid = group_paid_total(group)
        totals.append(GroupTotals(
            id=group.id,
            name=group.name,
            category=group.category,
            item_count=len(group.items),
            total=total,
            paid_total=paid,
            unpaid_total=total - paid,
        ))
    return totals


# --- Sub-items ---

def create_subitem(store: DocumentStore[Group], data: SubItemCreate) -> SubItem:
    """
    Appends a new sub-item to the group addressed by data.group_id.
    The store is not written when the group does not exist.
    """
    groups = store.read_all()
    group = _require_group(groups, data.group_id)

    item = SubItem(id=new_id(), **data.model_dump(exclude={"group_id"}))
    group.items.append(item)
    store.write_all(groups)
    logger.info(f"Created sub-item {item.id} in group {group.id}.")
    return item


def update_subitem(store: DocumentStore[Group], data: SubItemUpdate) -> SubItem:
    groups = store.read_all()
    group = _require_group(groups, data.group_id)

    index = find_index(group.items, data.id)
    if index == -1:
        logger.warning(f"Update rejected: sub-item {data.id} not found in group {group.id}.")
        raise ItemNotFoundError(group.id, data.id)

    group.items[index] = SubItem(**data.model_dump(exclude={"group_id"}))
    store.write_all(groups)
    logger.info(f"Updated sub-item {data.id} in group {group.id}.")
    return group.items[index]


def delete_subitem(store: DocumentStore[Group], group_id: str, item_id: str) -> None:
    groups = store.read_all()
    group = _require_group(groups, group_id)

    remaining = [item for item in group.items if item.id != item_id]
    if len(remaining) == len(group.items):
        logger.warning(f"Delete rejected: sub-item {item_id} not found in group {group_id}.")
        raise ItemNotFoundError(group_id, item_id)

    group.items = remaining
    store.write_all(groups)
    logger.info(f"Deleted sub-item {item_id} from group {group_id}.")
