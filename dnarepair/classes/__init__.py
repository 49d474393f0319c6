from . import (
    admin,
    base,
    blog,
    protein,
    protein_modification,
    protein_position,
)
