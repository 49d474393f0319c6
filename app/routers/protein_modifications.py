from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.common import serialize, serialize_all
from app.security import require_admin
from dnarepair.services import modifications

router = APIRouter()


class ModificationCreate(BaseModel):
    type: str = Field(..., description="Modification type, e.g. `phosphorylation`")
    position: str = Field(..., description="Modified residue, e.g. `S988`")
    description: Optional[str] = None
    effect: Optional[str] = None


class ModificationUpdate(BaseModel):
    type: Optional[str] = None
    position: Optional[str] = None
    description: Optional[str] = None
    effect: Optional[str] = None


@router.get("/protein/{protein_id}", summary="List modifications of a protein")
def list_modifications(protein_id: str):
    return serialize_all(modifications.list_for_protein(protein_id))


@router.post("/protein/{protein_id}", status_code=201, summary="Create modification")
def create_modification(protein_id: str, body: ModificationCreate, _=Depends(require_admin)):
    """
    Adds a modification to a protein. A protein can carry one modification per position.
    """
    return serialize(modifications.create_modification(protein_id, body.model_dump()))


@router.put("/{modification_id}", summary="Update modification")
def update_modification(modification_id: str, body: ModificationUpdate, _=Depends(require_admin)):
    changes = body.model_dump(exclude_unset=True)
    return serialize(modifications.update_modification(modification_id, changes))


@router.delete("/{modification_id}", summary="Delete modification")
def delete_modification(modification_id: str, _=Depends(require_admin)):
    modifications.delete_modification(modification_id)
    return {"message": "Protein modification deleted successfully"}
