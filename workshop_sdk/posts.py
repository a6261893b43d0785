# workshop_sdk/posts.py
import logging
from typing import Any, Mapping, cast

from workshop_sdk.api_client import JSON_HEADERS, ApiClient
from workshop_sdk.models import (
    CreatePostRequest,
    ModerationAction,
    ModeratePostRequest,
    Post,
    PostFilters,
    RateAction,
    RatePostRequest,
    UpdatePostRequest,
)
from workshop_sdk.query_builder import PostsQueryBuilder
from workshop_sdk.shapes import expect_list, expect_none, expect_object

logger = logging.getLogger(__name__)


def build_posts_query(filters: PostFilters | Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Turns listing filters into query parameters.

    Each filter feeds exactly one builder setter. Boolean filters count as set
    whenever they are not None, so only_approved=False is sent as
    "only_approved=false". The remaining filters are applied only when they
    hold a value (empty strings, empty tag lists and page 0 are skipped).
    """
    builder = PostsQueryBuilder()

    if filters is not None:
        if not isinstance(filters, PostFilters):
            filters = PostFilters.model_validate(dict(filters))

        if filters.search_query:
            builder.search(filters.search_query)
        if filters.author_id:
            builder.author(filters.author_id)
        if filters.only_approved is not None:
            builder.only_approved(filters.only_approved)
        if filters.show_declined is not None:
            builder.show_declined(filters.show_declined)
        if filters.type:
            builder.post_type(filters.type)
        if filters.tags:
            builder.tags(filters.tags)
        if filters.for_user_id:
            builder.for_user(filters.for_user_id)
        if filters.only_favorites is not None:
            builder.only_favorites(filters.only_favorites)
        if filters.rating_filter:
            builder.rating_filter(filters.rating_filter)
        if filters.sort_type:
            builder.sort_type(filters.sort_type)
        if filters.sort_order:
            builder.sort_order(filters.sort_order)
        if filters.page:
            builder.page(filters.page)
        if filters.limit:
            builder.limit(filters.limit)

    query = builder.build()
    return {key: value for key, value in query.items() if value is not None}


class PostsAPI:
    """Operations on /posts and its sub-resources"""

    def __init__(self, api: ApiClient):
        self.api = api

    async def get_posts(
        self, filters: PostFilters | Mapping[str, Any] | None = None
    ) -> list[Post]:
        """
        Lists posts.

        Args:
            filters: A PostFilters, or a plain dict using the same keys.
                Unknown keys are ignored.

        Raises:
            pydantic.ValidationError: A filter holds a value outside its
                enumerated set (e.g. sort_type="random"). Raised before any
                request is sent, so it is not a WorkshopAPIError.
        """
        query = build_posts_query(filters)
        response = await self.api.call("/posts", params=query)
        return cast(list[Post], expect_list("get_posts", response))

    async def get_post(self, post_id: int | str, for_user_id: str | None = None) -> Post:
        params = {"for_user_id": for_user_id} if for_user_id else None
        response = await self.api.call(f"/posts/{post_id}", params=params)
        return cast(Post, expect_object("get_post", response))

    async def create_post(self, request: CreatePostRequest) -> Post:
        response = await self.api.call(
            "/posts",
            method="POST",
            headers=JSON_HEADERS,
            body=request.model_dump(mode="json", exclude_none=True),
        )
        post = cast(Post, expect_object("create_post", response))
        logger.info(f"Created post {post.get('id')}")
        return post

    async def update_post(self, post_id: int, request: UpdatePostRequest) -> Post:
        # contents keep the caller's order; items without an id are new
        response = await self.api.call(
            f"/posts/{post_id}",
            method="PUT",
            headers=JSON_HEADERS,
            body=request.model_dump(mode="json", exclude_none=True),
        )
        return cast(Post, expect_object("update_post", response))

    async def delete_post(self, post_id: int) -> None:
        response = await self.api.call(
            f"/posts/{post_id}", method="DELETE", headers=JSON_HEADERS, body={}
        )
        expect_none("delete_post", response)

    async def favorite_post(self, post_id: int) -> None:
        response = await self.api.call(f"/posts/{post_id}/favorite", method="POST")
        expect_none("favorite_post", response)

    async def unfavorite_post(self, post_id: int) -> None:
        response = await self.api.call(f"/posts/{post_id}/favorite", method="DELETE")
        expect_none("unfavorite_post", response)

    async def rate_post(self, post_id: int, rating: RateAction) -> None:
        """
        Upvotes, downvotes or retracts the caller's vote.

        An unknown rating raises pydantic.ValidationError before sending.
        """
        payload = RatePostRequest(rating=rating)
        response = await self.api.call(
            f"/posts/{post_id}/rate",
            method="POST",
            headers=JSON_HEADERS,
            body=payload.model_dump(mode="json"),
        )
        expect_none("rate_post", response)

    async def moderate_post(
        self, post_id: int, action: ModerationAction, note: str | None = None
    ) -> None:
        """Approves or declines a post. The server requires POST_MODERATOR."""
        payload = ModeratePostRequest(action=action, note=note)
        response = await self.api.call(
            f"/posts/{post_id}/moderate",
            method="POST",
            headers=JSON_HEADERS,
            body=payload.model_dump(mode="json", exclude_none=True),
        )
        expect_none("moderate_post", response)
