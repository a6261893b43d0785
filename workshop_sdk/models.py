# workshop_sdk/models.py
from typing import Literal, NotRequired, TypedDict

from pydantic import BaseModel, ConfigDict

# --- Enumerations ---

PostType = Literal["map_suite", "game_mode", "skin_set", "custom_assets"]
ContentType = Literal["custom_map", "custom_logic", "custom_asset", "custom_skin"]
ModerationStatus = Literal["approved", "declined", "pending"]
RateType = Literal["upvoted", "downvoted", "voted", "none"]
RateAction = Literal["upvote", "downvote", "retract"]
ModerationAction = Literal["approve", "decline"]
PostsSortType = Literal[
    "popularity", "best_rated", "newest", "recently_updated", "most_discussed"
]
SortOrder = Literal["asc", "desc"]

# Display names, in the order the UI offers them. Keys are exactly the
# PostType / ContentType values.
POST_TYPES: dict[str, str] = {
    "map_suite": "Map Suite",
    "game_mode": "Game Mode",
    "skin_set": "Skin Set",
    "custom_assets": "Custom Assets",
}

CONTENT_TYPES: dict[str, str] = {
    "custom_map": "Custom Map",
    "custom_logic": "Custom Logic",
    "custom_asset": "Custom Assets",
    "custom_skin": "Skin Set",
}


# --- Read side ---
# Responses are only shape-checked (list / object / null). These describe what
# callers may rely on; nothing validates them at runtime.


class PostContent(TypedDict):
    id: NotRequired[int]
    content_type: ContentType
    content_data: str  # literal payload, or a URL when is_link is set
    is_link: bool


class PostModerationData(TypedDict):
    status: ModerationStatus
    note: str


class PostInteractionData(TypedDict):
    is_favorite: bool
    vote: RateType


class Post(TypedDict):
    id: int
    author_id: str
    title: str
    description: str
    preview_url: str
    post_type: PostType
    tags: list[str]
    contents: list[PostContent]
    created_at: str
    updated_at: str
    moderation_data: PostModerationData
    interaction_data: PostInteractionData
    rating: int
    comments_count: int
    favorites_count: int


class Comment(TypedDict):
    id: int
    post_id: int
    author_id: str
    content: str
    created_at: str
    updated_at: str


# --- Write side (Pydantic) ---


class CreatePostContent(BaseModel):
    data: str
    type: ContentType
    is_link: bool = False


class CreatePostRequest(BaseModel):
    title: str
    description: str
    preview_url: str = ""
    type: PostType
    tags: list[str] = []
    contents: list[CreatePostContent]


class UpdatePostContentRequest(BaseModel):
    id: int | None = None
    content_type: ContentType
    content_data: str
    is_link: bool = False


class UpdatePostRequest(BaseModel):
    title: str
    description: str
    preview_url: str = ""
    type: PostType
    tags: list[str] = []
    contents: list[UpdatePostContentRequest]


class RatePostRequest(BaseModel):
    rating: RateAction


class ModeratePostRequest(BaseModel):
    action: ModerationAction
    note: str | None = None


class AddCommentRequest(BaseModel):
    content: str
    postID: int


class UpdateCommentRequest(BaseModel):
    content: str


# --- Listing filters ---


class PostFilters(BaseModel):
    """
    Every filter the posts listing understands. Keys outside this set are
    dropped when a plain dict is validated into it.
    """

    model_config = ConfigDict(extra="ignore")

    search_query: str | None = None
    author_id: str | None = None
    only_approved: bool | None = None
    show_declined: bool | None = None
    type: PostType | None = None
    tags: list[str] | None = None
    for_user_id: str | None = None
    only_favorites: bool | None = None
    rating_filter: RateType | None = None
    sort_type: PostsSortType | None = None
    sort_order: SortOrder | None = None
    page: int | None = None
    limit: int | None = None


class CommentFilters(BaseModel):
    model_config = ConfigDict(extra="ignore")

    author_id: str | None = None
    sort_order: SortOrder | None = None
