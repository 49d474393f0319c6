from bson import ObjectId
from mongoengine.errors import ValidationError
from mongoengine.queryset.visitor import Q

from dnarepair.classes.blog import Blog
from dnarepair.common import logger
from dnarepair.errors import Forbidden, InvalidRequest, NotFound

TRIMMED_FIELDS = ("title", "content", "excerpt", "author")
EDITABLE_FIELDS = ("title", "content", "excerpt", "author", "tags", "category", "isAdminOnly", "publishDate")


def _visible(include_admin_only):
    if include_admin_only:
        return Blog.objects()
    # Posts written before the flag existed have no isAdminOnly field.
    return Blog.objects(isAdminOnly__ne=True)


def _apply(post, data):
    for key in EDITABLE_FIELDS:
        if key not in data:
            continue
        value = data[key]
        if key in TRIMMED_FIELDS and isinstance(value, str):
            value = value.strip()
        elif key == "tags":
            value = [tag.strip() for tag in value or []]
        elif key == "category":
            value = value or "General"
        elif key == "publishDate" and value is None:
            continue
        setattr(post, key, value)


def _save(post, failure_message):
    try:
        post.save()
    except ValidationError as e:
        raise InvalidRequest(failure_message, str(e))
    return post


def list_posts(include_admin_only=False):
    return list(_visible(include_admin_only).order_by("-publishDate"))


def get_post(post_id, is_admin=False):
    if not ObjectId.is_valid(post_id):
        raise NotFound("Blog post not found")
    post = Blog.objects(id=post_id).first()
    if post is None:
        raise NotFound("Blog post not found")
    if post.isAdminOnly and not is_admin:
        raise Forbidden("This post is only available to administrators")
    return post


def create_post(data):
    post = Blog(tags=[], category="General")
    _apply(post, data)
    _save(post, "Failed to create blog post")
    logger.info(f"Created blog post {post.id}: {post.title!r}")
    return post


def update_post(post_id, data):
    """
    Replaces the supplied fields. As on creation, a missing `tags` resets to an empty list
    and a missing `category` resets to General.
    """
    post = get_post(post_id, is_admin=True)
    _apply(post, {"tags": [], "category": "General", **data})
    _save(post, "Failed to update blog post")
    logger.info(f"Updated blog post {post.id}")
    return post


def delete_post(post_id):
    post = get_post(post_id, is_admin=True)
    post.delete()
    logger.info(f"Deleted blog post {post_id}")


def search_posts(query, include_admin_only=False):
    """
    Case-insensitive substring search over title, content and tags.
    """
    if not query or not query.strip():
        raise InvalidRequest("Search query is required")
    query = query.strip()
    matches = Q(title__icontains=query) | Q(content__icontains=query) | Q(tags__icontains=query)
    return list(_visible(include_admin_only).filter(matches).order_by("-publishDate"))


def list_by_category(category, include_admin_only=False):
    return list(_visible(include_admin_only).filter(category=category).order_by("-publishDate"))
