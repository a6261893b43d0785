# workshop_sdk/query_builder.py
"""
Fluent builders for the listing endpoints.

Setters store one value per dimension and return the builder, so calls chain
in any order and a repeated setter simply overwrites the earlier value.
build() hands back the accumulated dict as-is: it does not check for
required keys, does not type-check, and does not drop None values.
"""
from typing import Any, Sequence

from workshop_sdk.models import PostsSortType, PostType, RateType, SortOrder


class PostsQueryBuilder:
    """Query parameters for GET /posts"""

    def __init__(self) -> None:
        self.params: dict[str, Any] = {}

    def search(self, query: str) -> "PostsQueryBuilder":
        self.params["search_query"] = query
        return self

    def author(self, author_id: str) -> "PostsQueryBuilder":
        self.params["author_id"] = author_id
        return self

    def only_approved(self, flag: bool = True) -> "PostsQueryBuilder":
        self.params["only_approved"] = flag
        return self

    def show_declined(self, flag: bool = True) -> "PostsQueryBuilder":
        # Server requires the POST_MODERATOR role for this one
        self.params["show_declined"] = flag
        return self

    def post_type(self, post_type: PostType) -> "PostsQueryBuilder":
        self.params["type"] = post_type
        return self

    def tags(self, tags: Sequence[str]) -> "PostsQueryBuilder":
        self.params["tags"] = list(tags)
        return self

    def for_user(self, user_id: str) -> "PostsQueryBuilder":
        # Server requires the IMPERSONATOR role
        self.params["for_user_id"] = user_id
        return self

    def only_favorites(self, flag: bool = True) -> "PostsQueryBuilder":
        self.params["only_favorites"] = flag
        return self

    def rating_filter(self, rating: RateType) -> "PostsQueryBuilder":
        self.params["rating_filter"] = rating
        return self

    def sort_type(self, sort: PostsSortType) -> "PostsQueryBuilder":
        self.params["sort_type"] = sort
        return self

    def sort_order(self, order: SortOrder) -> "PostsQueryBuilder":
        self.params["sort_order"] = order
        return self

    def page(self, page: int) -> "PostsQueryBuilder":
        self.params["page"] = page
        return self

    def limit(self, limit: int) -> "PostsQueryBuilder":
        self.params["limit"] = limit
        return self

    def build(self) -> dict[str, Any]:
        return self.params


class CommentsQueryBuilder:
    """Query parameters for GET /comments"""

    def __init__(self) -> None:
        self.params: dict[str, Any] = {}

    def post_id(self, post_id: int) -> "CommentsQueryBuilder":
        self.params["postID"] = post_id
        return self

    def author(self, author_id: str) -> "CommentsQueryBuilder":
        self.params["author_id"] = author_id
        return self

    def sort_order(self, order: SortOrder) -> "CommentsQueryBuilder":
        self.params["sort_order"] = order
        return self

    def page(self, page: int) -> "CommentsQueryBuilder":
        self.params["page"] = page
        return self

    def limit(self, limit: int) -> "CommentsQueryBuilder":
        self.params["limit"] = limit
        return self

    def build(self) -> dict[str, Any]:
        return self.params
