"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error and health responses
- content: Feed page, content view, post and media ordering requests
- tag: Tag catalogue and tag links
- comment: Comments on content

Usage:
======
    from batinet.shared.schemas import ContentView, FeedPage
    from batinet.shared.schemas.common import ErrorResponse
"""

from batinet.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from batinet.shared.schemas.content import (
    MediaView,
    TagView,
    ContentView,
    FeedPage,
    CreatePostRequest,
    ReorderMediaRequest,
    SetCoverRequest,
)
from batinet.shared.schemas.tag import (
    TagResponse,
    CreateTagRequest,
    LinkTagRequest,
    TagLinkResponse,
)
from batinet.shared.schemas.comment import (
    CreateCommentRequest,
    UpdateCommentRequest,
    CommentResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Content
    "MediaView",
    "TagView",
    "ContentView",
    "FeedPage",
    "CreatePostRequest",
    "ReorderMediaRequest",
    "SetCoverRequest",
    # Tag
    "TagResponse",
    "CreateTagRequest",
    "LinkTagRequest",
    "TagLinkResponse",
    # Comment
    "CreateCommentRequest",
    "UpdateCommentRequest",
    "CommentResponse",
]
