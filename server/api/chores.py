# server/api/chores.py

from fastapi import APIRouter, Depends, Form

from api.guards import get_chores, require_authenticated, require_organizer
from core.chores import ChoreStore
from core.records import Identity


router = APIRouter(prefix="/api/chores")


@router.get("")
def list_chores(
    user: Identity = Depends(require_authenticated),
    chores: ChoreStore = Depends(get_chores),
):
    return {"chores": [chore.to_json() for chore in chores.list()]}


@router.post("")
def create_chore(
    title: str = Form(""),
    assigned_to: str = Form("", alias="assignedTo"),
    user: Identity = Depends(require_organizer),
    chores: ChoreStore = Depends(get_chores),
):
    """
    Creates a chore. Organizers only.
    """
    chore = chores.create(title, assigned_to, created_by=user.username)
    return {"message": "Chore created", "chore": chore.to_json()}


@router.post("/{chore_id}/complete")
def complete_chore(
    chore_id: int,
    user: Identity = Depends(require_authenticated),
    chores: ChoreStore = Depends(get_chores),
):
    chore = chores.complete(chore_id)
    return {"message": "Chore marked as completed", "chore": chore.to_json()}


@router.post("/{chore_id}/delete")
def delete_chore(
    chore_id: int,
    user: Identity = Depends(require_authenticated),
    chores: ChoreStore = Depends(get_chores),
):
    """
    Deletes a chore that has already been completed.
    """
    chores.delete(chore_id)
    return {"message": "Chore deleted successfully."}
