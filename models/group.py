"""Pydantic models for expense groups and their sub-items"""
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import List

from models.expense import Amount, Category, Status


class SubItemFields(BaseModel):
    """The mutable fields of a sub-item inside a group."""
    description: str
    amount: Amount
    date: date
    status: Status


class SubItem(SubItemFields):
    """
    A single expense line owned by exactly one group.
    Its id is only unique within that group's items.
    """
    id: str


class SubItemCreate(SubItemFields):
    group_id: str = Field(..., alias="groupId")

    class Config:
        populate_by_name = True


class SubItemUpdate(SubItemFields):
    group_id: str = Field(..., alias="groupId")
    id: str

    class Config:
        populate_by_name = True


class GroupFields(BaseModel):
    name: str
    category: Category


class GroupCreate(GroupFields):
    pass


class GroupUpdate(GroupFields):
    id: str


class Group(GroupFields):
    """
    A named collection of sub-items, e.g. "Kitchen Renovation".
    Totals are never stored; see group_total and group_paid_total.
    """
    id: str
    items: List[SubItem] = Field(default_factory=list)
    created_date: datetime = Field(..., alias="createdDate")

    class Config:
        populate_by_name = True
        from_attributes = True


class GroupTotals(BaseModel):
    """Derived per-group amounts, recomputed on every read."""
    id: str
    name: str
    category: Category
    item_count: int = Field(..., alias="itemCount")
    total: float
    paid_total: float = Field(..., alias="paidTotal")
    unpaid_total: float = Field(..., alias="unpaidTotal")

    class Config:
        populate_by_name = True


def group_total(group: Group) -> float:
    """Sum of every item amount regardless of status."""
    return sum((item.amount for item in group.items), 0.0)


def group_paid_total(group: Group) -> float:
    """Sum of the amounts of paid items only."""
    return sum((item.amount for item in group.items if item.status == 'paid'), 0.0)
