from blog_api.db import db
from blog_api.models.comment_model import Comment


def _active():
    return Comment.query.filter(Comment.is_deleted.is_(False))


def find_comment_by_id(comment_id: int):
    return _active().filter(Comment.id == comment_id).first()


def find_post_comments_query(post_id: int):
    return _active().filter(Comment.post_id == post_id)


def find_comment_ids_of_post(post_id: int) -> list[int]:
    rows = db.session.query(Comment.id).filter(
        Comment.post_id == post_id,
        Comment.is_deleted.is_(False),
    ).all()
    return [row[0] for row in rows]


def create_comment(post_id, author_id, content):
    comment = Comment(
        post_id=post_id,
        author_id=author_id,
        content=content,
        likes_count=0,
        dislikes_count=0,
    )
    db.session.add(comment)
    db.session.commit()
    return comment


def update_comment(comment_id: int, content) -> bool:
    updated = (
        _active()
        .filter(Comment.id == comment_id)
        .update({Comment.content: content}, synchronize_session=False)
    )
    db.session.commit()
    return updated == 1


def update_likes_info(comment_id: int, likes_count: int, dislikes_count: int) -> bool:
    updated = (
        _active()
        .filter(Comment.id == comment_id)
        .update(
            {
                Comment.likes_count: likes_count,
                Comment.dislikes_count: dislikes_count,
            },
            synchronize_session=False,
        )
    )
    db.session.commit()
    return updated == 1


def soft_delete_comment(comment_id: int) -> bool:
    updated = (
        _active()
        .filter(Comment.id == comment_id)
        .update({Comment.is_deleted: True}, synchronize_session=False)
    )
    db.session.commit()
    return updated == 1


def soft_delete_post_comments(post_id: int) -> int:
    updated = (
        _active()
        .filter(Comment.post_id == post_id)
        .update({Comment.is_deleted: True}, synchronize_session=False)
    )
    db.session.commit()
    return updated


def delete_all_comments():
    Comment.query.delete(synchronize_session=False)
    db.session.commit()
