"""API Routes for expenses, groups and group sub-items"""
from fastapi import APIRouter, HTTPException, Depends, Request, Query
from typing import List, Annotated, Optional
from services import expenses_service, groups_service
from services.document_store import DocumentStore
from services.errors import NotFoundError, StoreError
from models.expense import Expense, ExpenseCreate, ExpenseUpdate
from models.group import Group, GroupCreate, GroupTotals, GroupUpdate, SubItem, SubItemCreate, SubItemUpdate
from utils.translations import Language, translation_table
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

SUCCESS = {"success": True}

# --- Dependency Functions ---
def get_expenses_store(request: Request) -> DocumentStore[Expense]:
    """Dependency to get the expenses document store from the request state."""
    store = getattr(request.state, "expenses_store", None)
    if store is None:
        logger.error("Expenses store not found in application state. Check DATA_DIR.")
        raise HTTPException(status_code=503, detail="Storage service not available.")
    return store

def get_groups_store(request: Request) -> DocumentStore[Group]:
    """Dependency to get the groups document store from the request state."""
    store = getattr(request.state, "groups_store", None)
    if store is None:
        logger.error("Groups store not found in application state. Check DATA_DIR.")
        raise HTTPException(status_code=503, detail="Storage service not available.")
    return store

ExpensesStoreDep = Annotated[DocumentStore[Expense], Depends(get_expenses_store)]
GroupsStoreDep = Annotated[DocumentStore[Group], Depends(get_groups_store)]

# Handlers are plain functions: FastAPI runs them in its threadpool, and the
# read-all/write-all pair is not serialized across requests.

# --- Expenses ---

@router.get("/expenses", response_model=List[Expense], summary="Get All Expenses", description="Retrieves all expense records in insertion order.")
def get_expenses(store: ExpensesStoreDep) -> List[Expense]:
    logger.info("GET /expenses endpoint called.")
    try:
        return expenses_service.get_all_expenses(store)
    except StoreError as se:
        logger.error(f"Storage error fetching expenses: {se}")
        raise HTTPException(status_code=500, detail="Failed to read expenses")
    except Exception as e:
        logger.exception(f"Unexpected error fetching expenses: {e}")
        raise HTTPException(status_code=500, detail="Failed to read expenses")

@router.post("/expenses", response_model=Expense, status_code=201, summary="Create Expense")
def create_expense(store: ExpensesStoreDep, expense: ExpenseCreate) -> Expense:
    logger.info(f"POST /expenses endpoint called: {expense.description[:50]}")
    try:
        return expenses_service.create_expense(store, expense)
    except StoreError as se:
        logger.error(f"Storage error creating expense: {se}")
        raise HTTPException(status_code=500, detail="Failed to create expense")
    except Exception as e:
        logger.exception(f"Unexpected error creating expense: {e}")
        raise HTTPException(status_code=500, detail="Failed to create expense")

@router.put("/expenses", response_model=Expense, summary="Update Expense", description="Replaces every mutable field of the expense with the given id.")
def update_expense(store: ExpensesStoreDep, expense: ExpenseUpdate) -> Expense:
    logger.info(f"PUT /expenses endpoint called for id {expense.id}")
    try:
        return expenses_service.update_expense(store, expense)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except StoreError as se:
        logger.error(f"Storage error updating expense {expense.id}: {se}")
        raise HTTPException(status_code=500, detail="Failed to update expense")
    except Exception as e:
        logger.exception(f"Unexpected error updating expense {expense.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update expense")

@router.delete("/expenses", summary="Delete Expense")
def delete_expense(store: ExpensesStoreDep, id: Optional[str] = Query(None, description="Id of the expense to delete.")):
    logger.info(f"DELETE /expenses endpoint called for id {id}")
    if not id:
        raise HTTPException(status_code=400, detail="ID is required")
    try:
        expenses_service.delete_expense(store, id)
        return SUCCESS
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except StoreError as se:
        logger.error(f"Storage error deleting expense {id}: {se}")
        raise HTTPException(status_code=500, detail="Failed to delete expense")
    except Exception as e:
        logger.exception(f"Unexpected error deleting expense {id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete expense")

# --- Groups ---

@router.get("/groups", response_model=List[Group], summary="Get All Groups", description="Retrieves all groups with their sub-items.")
def get_groups(store: GroupsStoreDep) -> List[Group]:
    logger.info("GET /groups endpoint called.")
    try:
        return groups_service.get_all_groups(store)
    except StoreError as se:
        logger.error(f"Storage error fetching groups: {se}")
        raise HTTPException(status_code=500, detail="Failed to read groups")
    except Exception as e:
        logger.exception(f"Unexpected error fetching groups: {e}")
        raise HTTPException(status_code=500, detail="Failed to read groups")

@router.get("/groups/totals", response_model=List[GroupTotals], summary="Get Group Totals", description="Total, paid and unpaid amounts per group, computed from the current items.")
def get_group_totals(store: GroupsStoreDep) -> List[GroupTotals]:
    logger.info("GET /groups/totals endpoint called.")
    try:
        return groups_service.get_group_totals(store)
    except StoreError as se:
        logger.error(f"Storage error computing group totals: {se}")
        raise HTTPException(status_code=500, detail="Failed to read groups")
    except Exception as e:
        logger.exception(f"Unexpected error computing group totals: {e}")
        raise HTTPException(status_code=500, detail="Failed to read groups")

@router.post("/groups", response_model=Group, status_code=201, summary="Create Group")
def create_group(store: GroupsStoreDep, group: GroupCreate) -> Group:
    logger.info(f"POST /groups endpoint called: {group.name[:50]}")
    try:
        return groups_service.create_group(store, group)
    except StoreError as se:
        logger.error(f"Storage error creating group: {se}")
        raise HTTPException(status_code=500, detail="Failed to create group")
    except Exception as e:
        logger.exception(f"Unexpected error creating group: {e}")
        raise HTTPException(status_code=500, detail="Failed to create group")

@router.put("/groups", response_model=Group, summary="Update Group", description="Replaces the name and category of a group; its items are kept.")
def update_group(store: GroupsStoreDep, group: GroupUpdate) -> Group:
    logger.info(f"PUT /groups endpoint called for id {group.id}")
    try:
        return groups_service.update_group(store, group)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except StoreError as se:
        logger.error(f"Storage error updating group {group.id}: {se}")
        raise HTTPException(status_code=500, detail="Failed to update group")
    except Exception as e:
        logger.exception(f"Unexpected error updating group {group.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update group")

@router.delete("/groups", summary="Delete Group", description="Deletes a group together with all of its sub-items.")
def delete_group(store: GroupsStoreDep, id: Optional[str] = Query(None, description="Id of the group to delete.")):
    logger.info(f"DELETE /groups endpoint called for id {id}")
    if not id:
        raise HTTPException(status_code=400, detail="ID is required")
    try:
        groups_service.delete_group(store, id)
        return SUCCESS
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except StoreError as se:
        logger.error(f"Storage error deleting group {id}: {se}")
        raise HTTPException(status_code=500, detail="Failed to delete group")
    except Exception as e:
        logger.exception(f"Unexpected error deleting group {id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete group")

# --- Group sub-items ---

@router.post("/groups/items", response_model=SubItem, status_code=201, summary="Create Sub-item")
def create_subitem(store: GroupsStoreDep, item: SubItemCreate) -> SubItem:
    logger.info(f"POST /groups/items endpoint called for group {item.group_id}")
    try:
        return groups_service.create_subitem(store, item)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except StoreError as se:
        logger.error(f"Storage error creating sub-item in group {item.group_id}: {se}")
        raise HTTPException(status_code=500, detail="Failed to create sub-item")
    except Exception as e:
        logger.exception(f"Unexpected error creating sub-item in group {item.group_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to create sub-item")

@router.put("/groups/items", response_model=SubItem, summary="Update Sub-item")
def update_subitem(store: GroupsStoreDep, item: SubItemUpdate) -> SubItem:
    logger.info(f"PUT /groups/items endpoint called for item {item.id} in group {item.group_id}")
    try:
        return groups_service.update_subitem(store, item)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except StoreError as se:
        logger.error(f"Storage error updating sub-item {item.id}: {se}")
        raise HTTPException(status_code=500, detail="Failed to update sub-item")
    except Exception as e:
        logger.exception(f"Unexpected error updating sub-item {item.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update sub-item")

@router.delete("/groups/items", summary="Delete Sub-item")
def delete_subitem(
    store: GroupsStoreDep,
    groupId: Optional[str] = Query(None, description="Id of the owning group."),
    itemId: Optional[str] = Query(None, description="Id of the sub-item to delete."),
):
    logger.info(f"DELETE /groups/items endpoint called for item {itemId} in group {groupId}")
    if not groupId or not itemId:
        raise HTTPException(status_code=400, detail="Group ID and Item ID are required")
    try:
        groups_service.delete_subitem(store, groupId, itemId)
        return SUCCESS
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except StoreError as se:
        logger.error(f"Storage error deleting sub-item {itemId}: {se}")
        raise HTTPException(status_code=500, detail="Failed to delete sub-item")
    except Exception as e:
        logger.exception(f"Unexpected error deleting sub-item {itemId}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete sub-item")

# --- Translations ---

@router.get("/translations/{language}", summary="Get Translations", description="Returns the static UI string table for 'ar' or 'en'.")
def get_translations(language: Language):
    return translation_table(language)
