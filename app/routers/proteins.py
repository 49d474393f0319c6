from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.common import serialize, serialize_all
from app.security import require_admin
from dnarepair.services import proteins

router = APIRouter()


class TargetModificationModel(BaseModel):
    position: Optional[str] = None
    type: Optional[str] = None


class InteractionModel(BaseModel):
    targetId: str = Field(..., title="Id of the interacting protein")
    type: Optional[str] = None
    description: Optional[str] = None
    targetModification: Optional[TargetModificationModel] = None


class ProteinCreate(BaseModel):
    name: str
    uniprotId: str = Field(..., title="UniProt accession", description="Must be unique, e.g. `P38398`")
    pathway: str = Field(..., description="One of `HR`, `NHEJ` or `Both`")
    description: str
    function: str
    interactions: List[InteractionModel] = []


class ProteinUpdate(BaseModel):
    name: Optional[str] = None
    uniprotId: Optional[str] = None
    pathway: Optional[str] = None
    description: Optional[str] = None
    function: Optional[str] = None
    interactions: Optional[List[InteractionModel]] = None


@router.get("", summary="List proteins")
def list_proteins():
    """
    Returns an array of every protein in the knowledge base.
    """
    return serialize_all(proteins.list_proteins())


@router.get("/pathway/{pathway}", summary="List proteins in a pathway")
def list_proteins_by_pathway(pathway: str):
    """
    Returns the proteins whose `pathway` is exactly `pathway` (`HR`, `NHEJ` or `Both`).
    """
    return serialize_all(proteins.list_by_pathway(pathway))


@router.get("/{protein_id}", summary="Get protein")
def get_protein(protein_id: str):
    return serialize(proteins.get_protein(protein_id))


@router.post("", status_code=201, summary="Create protein")
def create_protein(body: ProteinCreate, _=Depends(require_admin)):
    return serialize(proteins.create_protein(body.model_dump()))


@router.put("/{protein_id}", summary="Update protein")
def update_protein(protein_id: str, body: ProteinUpdate, _=Depends(require_admin)):
    """
    Fields present in the body replace the stored ones; absent fields are kept.
    """
    changes = body.model_dump(exclude_unset=True)
    return serialize(proteins.update_protein(protein_id, changes))


@router.delete("/{protein_id}", summary="Delete protein")
def delete_protein(protein_id: str, _=Depends(require_admin)):
    proteins.delete_protein(protein_id)
    return {"message": "Protein deleted successfully"}
