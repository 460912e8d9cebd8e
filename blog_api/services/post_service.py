import logging

from blog_api.common.result import Result
from blog_api.common.time import to_iso
from blog_api.repositories import blog_repository, comment_repository, post_repository
from blog_api.services.reaction_service import get_comment_reactions

logger = logging.getLogger(__name__)


def serialize_post(post):
    return {
        "id": str(post.id),
        "title": post.title,
        "shortDescription": post.short_description,
        "content": post.content,
        "blogId": str(post.blog_id),
        "blogName": post.blog.name if post.blog else "",
        "createdAt": to_iso(post.created_at),
    }


def _require_blog(blog_id):
    blog = blog_repository.find_blog_by_id(blog_id)
    if not blog:
        raise ValueError("Blog not found")
    return blog


def find_post_by_id(post_id: int):
    return post_repository.find_post_by_id(post_id)


def find_posts_query():
    return post_repository.find_posts_query()


def create_post(blog_id, title, short_description, content):
    _require_blog(blog_id)
    post = post_repository.create_post(blog_id, title, short_description, content)
    return serialize_post(post)


def update_post(post_id: int, blog_id, title, short_description, content) -> bool:
    _require_blog(blog_id)
    return post_repository.update_post(post_id, blog_id, title, short_description, content)


def delete_post(post_id: int) -> Result:
    if not post_repository.soft_delete_post(post_id):
        return Result.not_found()

    reactions = get_comment_reactions()
    comment_ids = comment_repository.find_comment_ids_of_post(post_id)
    comment_repository.soft_delete_post_comments(post_id)
    for comment_id in comment_ids:
        result = reactions.remove_target_reactions(comment_id)
        if not result.ok:
            return result

    logger.info("Deleted post %s with %d comments", post_id, len(comment_ids))
    return Result.success()
