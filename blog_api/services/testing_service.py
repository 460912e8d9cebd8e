import logging

from blog_api.common.result import Result
from blog_api.repositories import (
    blog_repository,
    comment_repository,
    post_repository,
    user_repository,
)
from blog_api.services.reaction_service import get_comment_reactions

logger = logging.getLogger(__name__)


def delete_all_data():
    result = get_comment_reactions().remove_all()
    if not result.ok:
        return result

    comment_repository.delete_all_comments()
    post_repository.delete_all_posts()
    blog_repository.delete_all_blogs()
    user_repository.delete_all_users()
    logger.warning("All data deleted")
    return Result.success()
