from fastapi import APIRouter

from dnarepair import __version__

router = APIRouter()

ENDPOINTS = {
    "auth": "/api/auth",
    "proteins": "/api/proteins",
    "proteinPositions": "/api/protein-positions",
    "proteinModifications": "/api/protein-modifications",
    "blogs": "/api/blogs",
}


@router.get("/", summary="API index")
def index():
    """
    Returns the API version and the base path of each resource.
    Read routes are public; creating, updating and deleting requires an admin bearer token.
    """
    return {
        "message": "Welcome to DNA Repair Knowledge Base API",
        "version": __version__,
        "endpoints": ENDPOINTS,
        "security": {
            "note": "Admin endpoints require JWT token in Authorization header: Bearer <token>",
        },
    }
