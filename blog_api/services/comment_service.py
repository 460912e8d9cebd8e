import logging

from blog_api.common.like_status import LikeStatus
from blog_api.common.result import Result, ResultStatus
from blog_api.common.time import to_iso
from blog_api.repositories import comment_repository, post_repository, user_repository
from blog_api.services.reaction_service import get_comment_reactions

logger = logging.getLogger(__name__)


def serialize_comment(comment, my_status: LikeStatus):
    author = comment.author
    return {
        "id": str(comment.id),
        "content": comment.content,
        "commentatorInfo": {
            "userId": str(comment.author_id),
            "userLogin": author.login if author else f"user-{comment.author_id}",
        },
        "likesInfo": {
            "likesCount": comment.likes_count,
            "dislikesCount": comment.dislikes_count,
            "myStatus": my_status.value,
        },
        "createdAt": to_iso(comment.created_at),
    }


def serialize_comments(comments, viewer_id):
    statuses = get_comment_reactions().viewer_reaction_statuses(
        viewer_id, [comment.id for comment in comments]
    )
    return [serialize_comment(comment, statuses[comment.id]) for comment in comments]


def get_comment_view(comment_id: int, viewer_id):
    comment = comment_repository.find_comment_by_id(comment_id)
    if not comment:
        return None

    my_status = get_comment_reactions().viewer_reaction_status(viewer_id, comment.id)
    return serialize_comment(comment, my_status)


def create_comment(post_id: int, user_id: int, content) -> Result:
    if not post_repository.find_post_by_id(post_id):
        return Result.not_found()

    if not user_repository.find_user_by_id(user_id):
        return Result(ResultStatus.UNAUTHORIZED)

    comment = comment_repository.create_comment(
        post_id=post_id,
        author_id=user_id,
        content=content.strip(),
    )
    return Result(ResultStatus.CREATED, serialize_comment(comment, LikeStatus.NONE))


def find_post_comments_query(post_id: int):
    if not post_repository.find_post_by_id(post_id):
        raise ValueError("Post not found")
    return comment_repository.find_post_comments_query(post_id)


def _owned_comment(comment_id: int, user_id: int):
    comment = comment_repository.find_comment_by_id(comment_id)
    if not comment:
        return None, Result.not_found()
    if comment.author_id != user_id:
        return None, Result(ResultStatus.FORBIDDEN)
    return comment, None


def update_comment(comment_id: int, user_id: int, content) -> Result:
    comment, error = _owned_comment(comment_id, user_id)
    if error:
        return error

    if not comment_repository.update_comment(comment.id, content.strip()):
        return Result.internal_error()
    return Result.success()


def delete_comment(comment_id: int, user_id: int) -> Result:
    comment, error = _owned_comment(comment_id, user_id)
    if error:
        return error

    if not comment_repository.soft_delete_comment(comment.id):
        return Result.internal_error()

    result = get_comment_reactions().remove_target_reactions(comment.id)
    if not result.ok:
        return result

    logger.info("User %s deleted comment %s", user_id, comment.id)
    return Result.success()


def set_like_status(comment_id: int, user_id: int, status: LikeStatus) -> Result:
    return get_comment_reactions().set_reaction(user_id, comment_id, status)
