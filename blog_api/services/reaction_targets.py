from typing import Protocol

from blog_api.repositories import comment_repository


class ReactionTarget(Protocol):
    """What the ledger and recount services need from a reactable entity."""

    def exists(self, target_id: int) -> bool:
        ...

    def set_aggregate_counts(self, target_id: int, likes: int, dislikes: int) -> bool:
        ...


class CommentReactionTarget:
    kind = "comment"

    def exists(self, target_id: int) -> bool:
        return comment_repository.find_comment_by_id(target_id) is not None

    def set_aggregate_counts(self, target_id: int, likes: int, dislikes: int) -> bool:
        return comment_repository.update_likes_info(target_id, likes, dislikes)
