from bson import ObjectId
from mongoengine.errors import NotUniqueError, ValidationError

from dnarepair.classes.protein import PATHWAYS, Interaction, Protein, TargetModification
from dnarepair.common import logger
from dnarepair.errors import InvalidRequest, NotFound

TRIMMED_FIELDS = ("name", "uniprotId", "description", "function")


def _interactions(raw_interactions):
    interactions = []
    for raw in raw_interactions or []:
        target_id = raw.get("targetId")
        if not ObjectId.is_valid(str(target_id)):
            raise InvalidRequest(
                "Invalid protein data", f"Interaction target {target_id!r} is not a valid id"
            )
        modification = raw.get("targetModification")
        interactions.append(
            Interaction(
                targetId=ObjectId(str(target_id)),
                type=raw.get("type"),
                description=raw.get("description"),
                targetModification=TargetModification(**modification) if modification else None,
            )
        )
    return interactions


def _apply(protein, data):
    for key, value in data.items():
        if key == "interactions":
            value = _interactions(value)
        elif key in TRIMMED_FIELDS and isinstance(value, str):
            value = value.strip()
        setattr(protein, key, value)


def _save(protein, failure_message):
    try:
        protein.save()
    except NotUniqueError:
        raise InvalidRequest(
            failure_message, f"A protein with uniprotId {protein.uniprotId!r} already exists"
        )
    except ValidationError as e:
        raise InvalidRequest(failure_message, str(e))
    return protein


def list_proteins():
    return list(Protein.objects())


def list_by_pathway(pathway):
    if pathway not in PATHWAYS:
        raise InvalidRequest(f"Invalid pathway. Must be one of {', '.join(PATHWAYS)}.")
    return list(Protein.objects(pathway=pathway))


def get_protein(protein_id):
    if not ObjectId.is_valid(protein_id):
        raise NotFound("Protein not found")
    protein = Protein.objects(id=protein_id).first()
    if protein is None:
        raise NotFound("Protein not found")
    return protein


def create_protein(data):
    protein = Protein()
    _apply(protein, data)
    _save(protein, "Error creating protein")
    logger.info(f"Created protein {protein.name} ({protein.uniprotId}) as {protein.id}")
    return protein


def update_protein(protein_id, changes):
    """
    Merge `changes` into the stored protein; fields not present are left untouched.
    """
    protein = get_protein(protein_id)
    _apply(protein, changes)
    _save(protein, "Error updating protein")
    logger.info(f"Updated protein {protein.id}: {', '.join(sorted(changes))}")
    return protein


def delete_protein(protein_id):
    # Positions and modifications referencing the protein are kept.
    protein = get_protein(protein_id)
    protein.delete()
    logger.info(f"Deleted protein {protein_id}")
