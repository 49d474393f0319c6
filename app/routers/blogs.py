from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from app.common import serialize, serialize_all
from app.security import CurrentUser, get_optional_user, require_admin
from dnarepair.services import blogs

router = APIRouter()


class BlogCreate(BaseModel):
    title: str
    content: str
    excerpt: str
    author: str
    tags: Optional[List[str]] = None
    category: Optional[str] = Field(None, description="`DNA-Repair`, `Research` or `General` (default)")
    isAdminOnly: bool = False
    publishDate: Optional[datetime] = None


class BlogUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[List[str]] = None
    category: Optional[str] = None
    isAdminOnly: Optional[bool] = None
    publishDate: Optional[datetime] = None


def _is_admin(user: Optional[CurrentUser]):
    return user is not None and user.is_admin


@router.get("", summary="List blog posts")
def list_posts(user: Optional[CurrentUser] = Depends(get_optional_user)):
    """
    Returns blog posts, newest first. Admin-only posts are left out unless the caller is an admin.
    """
    return serialize_all(blogs.list_posts(include_admin_only=_is_admin(user)))


@router.get("/admin-all", summary="List all blog posts (admin)")
def list_all_posts(_=Depends(require_admin)):
    return serialize_all(blogs.list_posts(include_admin_only=True))


@router.get("/search", summary="Search blog posts")
def search_posts(
    query: Optional[str] = Query(None, description="Text matched against title, content and tags"),
    user: Optional[CurrentUser] = Depends(get_optional_user),
):
    return serialize_all(blogs.search_posts(query, include_admin_only=_is_admin(user)))


@router.get("/category/{category}", summary="List blog posts in a category")
def list_posts_by_category(category: str, user: Optional[CurrentUser] = Depends(get_optional_user)):
    return serialize_all(blogs.list_by_category(category, include_admin_only=_is_admin(user)))


@router.get("/{post_id}", summary="Get blog post")
def get_post(post_id: str, user: Optional[CurrentUser] = Depends(get_optional_user)):
    return serialize(blogs.get_post(post_id, is_admin=_is_admin(user)))


@router.post("", status_code=201, summary="Create blog post")
def create_post(body: BlogCreate, _=Depends(require_admin)):
    return serialize(blogs.create_post(body.model_dump()))


@router.put("/{post_id}", summary="Update blog post")
def update_post(post_id: str, body: BlogUpdate, _=Depends(require_admin)):
    return serialize(blogs.update_post(post_id, body.model_dump(exclude_unset=True)))


@router.delete("/{post_id}", summary="Delete blog post")
def delete_post(post_id: str, _=Depends(require_admin)):
    blogs.delete_post(post_id)
    return {"message": "Blog post deleted successfully"}
