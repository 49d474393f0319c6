from typing import Dict, List, Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, StrictFloat

from app.common import serialize
from app.security import require_admin
from dnarepair.errors import InvalidRequest
from dnarepair.services import positions

router = APIRouter()


class Coordinates(BaseModel):
    x: StrictFloat
    y: StrictFloat


class PositionEntry(Coordinates):
    proteinId: str


class PositionsRequest(BaseModel):
    positions: Union[Dict[str, Coordinates], List[PositionEntry]]


class PositionRequest(BaseModel):
    position: Optional[Coordinates] = None
    x: Optional[StrictFloat] = None
    y: Optional[StrictFloat] = None

    def coordinates(self):
        if self.position is not None:
            return self.position
        if self.x is None or self.y is None:
            raise InvalidRequest("Invalid position data")
        return Coordinates(x=self.x, y=self.y)


@router.get("/{pathway}", summary="Get pathway layout")
def get_positions(pathway: str):
    """
    Returns the saved positions of a pathway (`HR` or `NHEJ`) as a hash map of protein id to `{x, y}`.
    """
    return positions.get_position_map(pathway)


@router.get("/{pathway}/{protein_id}", summary="Get protein position")
def get_position(pathway: str, protein_id: str):
    return serialize(positions.get_position(pathway, protein_id))


@router.post("/{pathway}", summary="Save pathway layout")
def save_positions(pathway: str, body: PositionsRequest, _=Depends(require_admin)):
    """
    Upserts many positions at once. `positions` is either a hash map of protein id to `{x, y}`
    or an array of `{proteinId, x, y}`. Entries are saved one by one; there is no rollback.
    """
    positions.validate_pathway(pathway)
    if isinstance(body.positions, dict):
        entries = {k: v.model_dump() for k, v in body.positions.items()}
    else:
        entries = [entry.model_dump() for entry in body.positions]
    count = positions.save_positions(pathway, entries)
    return {"message": "Positions saved successfully", "count": count}


@router.put("/{pathway}/{protein_id}", summary="Save protein position")
def update_position(
    pathway: str, protein_id: str, body: PositionRequest, _=Depends(require_admin)
):
    """
    Creates or overwrites one position. The body is `{"position": {"x": .., "y": ..}}` or `{"x": .., "y": ..}`.
    """
    positions.validate_pathway(pathway)
    coordinates = body.coordinates()
    return serialize(positions.upsert_position(pathway, protein_id, coordinates.x, coordinates.y))


@router.delete("/{pathway}/reset", summary="Reset pathway layout")
def reset_positions(pathway: str, _=Depends(require_admin)):
    deleted = positions.reset_positions(pathway)
    return {"message": "Positions reset successfully", "deleted": deleted}


@router.delete("/{pathway}/{protein_id}", summary="Delete protein position")
def delete_position(pathway: str, protein_id: str, _=Depends(require_admin)):
    positions.delete_position(pathway, protein_id)
    return {"message": "Position deleted successfully"}
