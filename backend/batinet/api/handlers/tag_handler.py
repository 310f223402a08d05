"""
Tag Handler

Tag catalogue and tag links.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from batinet.api.dependencies import CurrentUserId
from batinet.api.dependencies.services import get_tag_service
from batinet.shared.schemas.common import MessageResponse
from batinet.shared.schemas.tag import (
    CreateTagRequest,
    LinkTagRequest,
    TagLinkResponse,
    TagResponse,
)
from batinet.shared.services.tag_service import TagService
from batinet.shared.utils.identifiers import parse_id


router = APIRouter()


@router.get("", response_model=list[TagResponse])
async def list_tags(
    tag_type: Optional[str] = Query(None, alias="type", description="Tag category"),
    tag_service: TagService = Depends(get_tag_service),
):
    """List tags, optionally of one category."""
    return await tag_service.list_tags(tag_type)


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: CreateTagRequest,
    _user_id: CurrentUserId,
    tag_service: TagService = Depends(get_tag_service),
):
    """Add a tag to the catalogue. Slugs are unique."""
    return await tag_service.create_tag(request.slug, request.label, request.type)


@router.post("/link", response_model=TagLinkResponse, status_code=status.HTTP_201_CREATED)
async def link_tag(
    request: LinkTagRequest,
    _user_id: CurrentUserId,
    tag_service: TagService = Depends(get_tag_service),
):
    """Attach a tag to an entity."""
    return await tag_service.link(request.tag_id, request.entity_type, request.entity_id)


@router.delete("/link/{link_id}", response_model=MessageResponse)
async def unlink_tag(
    link_id: str,
    _user_id: CurrentUserId,
    tag_service: TagService = Depends(get_tag_service),
):
    """Remove a tag link."""
    await tag_service.unlink(parse_id(link_id))
    return MessageResponse(message="Tag link removed")


@router.get("/{tag_id}/entities", response_model=list[TagLinkResponse])
async def list_tag_entities(
    tag_id: str,
    tag_service: TagService = Depends(get_tag_service),
):
    """Entities carrying a tag."""
    return await tag_service.list_links(parse_id(tag_id))
