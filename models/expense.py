"""Pydantic models for Expense data"""
from pydantic import BaseModel, Field
from datetime import date
from typing import Annotated, Literal

Category = Literal['maintenance', 'home', 'other']
Status = Literal['paid', 'unpaid']
# Finite floats only; NaN and infinities have no JSON representation
Amount = Annotated[float, Field(allow_inf_nan=False)]


class ExpenseFields(BaseModel):
    """
    The mutable fields of an expense. Every update supplies all of them.
    """
    description: str
    category: Category
    amount: Amount
    date: date
    status: Status


class ExpenseCreate(ExpenseFields):
    """Request body for creating an expense; the id is assigned by the store."""
    pass


class ExpenseUpdate(ExpenseFields):
    """Request body for a full-replacement update of an existing expense."""
    id: str


class Expense(ExpenseFields):
    """
    Represents a single stored expense record.
    """
    id: str

    class Config:
        populate_by_name = True
        from_attributes = True
