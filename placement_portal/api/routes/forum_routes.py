"""
Forum Routes - interview experiences shared by students

GET /forum-posts - List posts
POST /forum-posts - Share an interview experience (student only)
DELETE /forum-posts/{post_id} - Remove a post (admin only)
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from placement_portal.core.auth import get_current_user, get_current_student, get_current_admin
from placement_portal.models import ActivityType, ForumPost, User
from placement_portal.schemas.schemas import ForumPostCreate, MessageResponse
from placement_portal.services.activity_service import record_activity
from placement_portal.storage import PortalStorage, get_storage

router = APIRouter(prefix="/forum-posts", tags=["Forum"])


@router.get("", response_model=List[ForumPost])
async def list_posts(
    user: User = Depends(get_current_user),
    storage: PortalStorage = Depends(get_storage)
):
    """List all forum posts, newest first."""
    return storage.list_forum_posts()


@router.post("", response_model=ForumPost, status_code=201)
async def create_post(
    post: ForumPostCreate,
    student: User = Depends(get_current_student),
    storage: PortalStorage = Depends(get_storage)
):
    """Share an interview experience. The author comes from the token."""
    created = storage.create_forum_post({
        **post.model_dump(),
        "author_id": student.id,
        "author_name": student.full_name,
    })

    record_activity(
        storage,
        student,
        ActivityType.post,
        f"Posted interview experience for {post.position} at {post.company_name}",
    )
    return created


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    admin: User = Depends(get_current_admin),
    storage: PortalStorage = Depends(get_storage)
):
    """Delete a forum post."""
    if not storage.delete_forum_post(post_id):
        raise HTTPException(status_code=404, detail="Post not found")
    return MessageResponse(message="Post deleted")
