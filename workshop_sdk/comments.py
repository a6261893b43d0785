# workshop_sdk/comments.py
from typing import Any, Mapping, cast

from workshop_sdk.api_client import JSON_HEADERS, ApiClient
from workshop_sdk.models import (
    AddCommentRequest,
    Comment,
    CommentFilters,
    UpdateCommentRequest,
)
from workshop_sdk.query_builder import CommentsQueryBuilder
from workshop_sdk.shapes import expect_list, expect_none, expect_object


class CommentsAPI:
    """Operations on /comments"""

    def __init__(self, api: ApiClient):
        self.api = api

    async def get_comments(
        self,
        post_id: int,
        page: int,
        limit: int,
        extra_params: CommentFilters | Mapping[str, Any] | None = None,
    ) -> list[Comment]:
        """
        Lists the comments of one post.

        extra_params may add author_id and sort_order; other keys are ignored.
        """
        builder = CommentsQueryBuilder().post_id(post_id).page(page).limit(limit)

        if extra_params is not None:
            if not isinstance(extra_params, CommentFilters):
                extra_params = CommentFilters.model_validate(dict(extra_params))
            if extra_params.author_id:
                builder.author(extra_params.author_id)
            if extra_params.sort_order:
                builder.sort_order(extra_params.sort_order)

        response = await self.api.call("/comments", params=builder.build())
        return cast(list[Comment], expect_list("get_comments", response))

    async def add_comment(self, content: str, post_id: int) -> Comment:
        payload = AddCommentRequest(content=content, postID=post_id)
        response = await self.api.call(
            "/comments",
            method="POST",
            headers=JSON_HEADERS,
            body=payload.model_dump(mode="json"),
        )
        return cast(Comment, expect_object("add_comment", response))

    async def update_comment(self, comment_id: int, content: str) -> Comment:
        payload = UpdateCommentRequest(content=content)
        response = await self.api.call(
            f"/comments/{comment_id}",
            method="PUT",
            headers=JSON_HEADERS,
            body=payload.model_dump(mode="json"),
        )
        return cast(Comment, expect_object("update_comment", response))

    async def delete_comment(self, comment_id: int) -> None:
        response = await self.api.call(f"/comments/{comment_id}", method="DELETE")
        expect_none("delete_comment", response)
