from bson import ObjectId
from mongoengine.errors import NotUniqueError, ValidationError

from dnarepair.classes.protein_modification import ProteinModification
from dnarepair.common import logger
from dnarepair.errors import InvalidRequest, NotFound

DUPLICATE_MESSAGE = "This modification position already exists for this protein"
EDITABLE_FIELDS = ("type", "position", "description", "effect")
TRIMMED_FIELDS = ("type", "position")


def _check_id(value, message):
    if not ObjectId.is_valid(value):
        raise InvalidRequest(message)


def _editable(data):
    fields = {}
    for key, value in data.items():
        if key not in EDITABLE_FIELDS:
            continue
        if key in TRIMMED_FIELDS and isinstance(value, str):
            value = value.strip()
        fields[key] = value
    return fields


def _save(modification, failure_message):
    try:
        modification.save()
    except NotUniqueError:
        raise InvalidRequest(DUPLICATE_MESSAGE)
    except ValidationError as e:
        raise InvalidRequest(failure_message, str(e))
    return modification


def _get(modification_id):
    _check_id(modification_id, "Invalid modification ID")
    modification = ProteinModification.objects(id=modification_id).first()
    if modification is None:
        raise NotFound("Protein modification not found")
    return modification


def list_for_protein(protein_id):
    _check_id(protein_id, "Invalid protein ID")
    return list(ProteinModification.objects(proteinId=protein_id))


def create_modification(protein_id, data):
    # The protein itself is not looked up.
    _check_id(protein_id, "Invalid protein ID")
    modification = ProteinModification(
        proteinId=ObjectId(protein_id),
        **_editable(data),
    )
    _save(modification, "Error creating protein modification")
    logger.info(f"Created {modification.type} at {modification.position} for protein {protein_id}")
    return modification


def update_modification(modification_id, changes):
    modification = _get(modification_id)
    for key, value in _editable(changes).items():
        setattr(modification, key, value)
    _save(modification, "Error updating protein modification")
    logger.info(f"Updated protein modification {modification_id}")
    return modification


def delete_modification(modification_id):
    modification = _get(modification_id)
    modification.delete()
    logger.info(f"Deleted protein modification {modification_id}")
