"""Service layer for handling expense-related logic."""
import logging
from typing import List

from models.expense import Expense, ExpenseCreate, ExpenseUpdate
from services.document_store import DocumentStore, find_index
from services.errors import ExpenseNotFoundError
from utils.ids import new_id

logger = logging.getLogger(__name__)


def get_all_expenses(store: DocumentStore[Expense]) -> List[Expense]:
    """Returns every stored expense in insertion order."""
    expenses = store.read_all()
    logger.info(f"Fetched {len(expenses)} expenses from '{store.name}'.")
    return expenses


def create_expense(store: DocumentStore[Expense], data: ExpenseCreate) -> Expense:
    """Appends a new expense with a freshly generated id and persists the store."""
    expenses = store.read_all()
    expense = Expense(id=new_id(), **data.model_dump())
    expenses.append(expense)
    store.write_all(expenses)
    logger.info(f"Created expense {expense.id} ({expense.description[:20]}).")
    return expense


def update_expense(store: DocumentStore[Expense], data: ExpenseUpdate) -> Expense:
    """
    Replaces every mutable field of the expense matching data.id, keeping its
    id and position in the sequence.
    """
    expenses = store.read_all()
    index = find_index(expenses, data.id)
    if index == -1:
        logger.warning(f"Update rejected: expense {data.id} not found.")
        raise ExpenseNotFoundError(data.id)

    expenses[index] = Expense(**data.model_dump())
    store.write_all(expenses)
    logger.info(f"Updated expense {data.id}.")
    return expenses[index]


def delete_expense(store: DocumentStore[Expense], expense_id: str) -> None:
    expenses = store.read_all()
    remaining = [expense for expense in expenses if expense.id != expense_id]
    if len(remaining) == len(expenses):
        logger.warning(f"Delete rejected: expense {expense_id} not found.")
        raise ExpenseNotFoundError(expense_id)

    store.write_all(remaining)
    logger.info(f"Deleted expense {expense_id}.")
