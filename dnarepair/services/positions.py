from collections.abc import Mapping

from dnarepair.classes.protein_position import PATHWAYS, Position, ProteinPosition
from dnarepair.common import logger, utcnow
from dnarepair.errors import InvalidRequest, NotFound


def validate_pathway(pathway):
    if pathway not in PATHWAYS:
        raise InvalidRequest("Invalid pathway. Must be HR or NHEJ.")
    return pathway


def _coordinates(value):
    try:
        x, y = value["x"], value["y"]
    except (KeyError, TypeError):
        raise InvalidRequest("Invalid position data", f"Expected an object with x and y, got {value!r}")
    for coordinate in (x, y):
        if isinstance(coordinate, bool) or not isinstance(coordinate, (int, float)):
            raise InvalidRequest("Invalid position data", f"Coordinates must be numbers, got {value!r}")
    return float(x), float(y)


def get_position_map(pathway):
    """
    Returns the saved layout of a pathway as ``{proteinId: {"x": ..., "y": ...}}``.
    """
    validate_pathway(pathway)
    return {
        doc.proteinId: doc.position.as_dict()
        for doc in ProteinPosition.objects(pathway=pathway)
    }


def get_position(pathway, protein_id):
    validate_pathway(pathway)
    position = ProteinPosition.objects(pathway=pathway, proteinId=protein_id).first()
    if position is None:
        raise NotFound("Position not found")
    return position


def upsert_position(pathway, protein_id, x, y):
    """
    Create or overwrite the position of `protein_id` in `pathway`.

    The (proteinId, pathway) pair is the key; concurrent writers race and the last write wins.
    """
    validate_pathway(pathway)
    now = utcnow()
    return ProteinPosition.objects(pathway=pathway, proteinId=protein_id).modify(
        upsert=True,
        new=True,
        set__position=Position(x=x, y=y),
        set__updatedAt=now,
        set_on_insert__createdAt=now,
    )


def save_positions(pathway, positions):
    """
    Upserts every entry of `positions`, which is either a mapping of
    ``{proteinId: {"x": ..., "y": ...}}`` or a list of ``{"proteinId": ..., "x": ..., "y": ...}``.

    Entries are written one at a time and in order. There is no transaction: if an entry fails,
    the entries before it stay saved.
    """
    validate_pathway(pathway)

    if isinstance(positions, Mapping):
        entries = [(str(protein_id), _coordinates(value)) for protein_id, value in positions.items()]
    elif isinstance(positions, list):
        entries = []
        for value in positions:
            if not isinstance(value, Mapping) or not value.get("proteinId"):
                raise InvalidRequest("Invalid positions data", f"Missing proteinId in {value!r}")
            entries.append((str(value["proteinId"]), _coordinates(value)))
    else:
        raise InvalidRequest("Invalid positions data")

    for protein_id, (x, y) in entries:
        upsert_position(pathway, protein_id, x, y)

    logger.info(f"Saved {len(entries):,} positions for pathway {pathway}")
    return len(entries)


def delete_position(pathway, protein_id):
    position = get_position(pathway, protein_id)
    position.delete()
    logger.info(f"Deleted position of {protein_id} in pathway {pathway}")


def reset_positions(pathway):
    validate_pathway(pathway)
    deleted = ProteinPosition.objects(pathway=pathway).delete()
    logger.info(f"Reset pathway {pathway} - removed {deleted:,} positions")
    return deleted
