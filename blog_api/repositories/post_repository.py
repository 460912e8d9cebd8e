from blog_api.db import db
from blog_api.models.post_model import Post


def _active():
    return Post.query.filter(Post.is_deleted.is_(False))


def find_post_by_id(post_id: int):
    return _active().filter(Post.id == post_id).first()


def find_posts_query(blog_id=None):
    query = _active()
    if blog_id is not None:
        query = query.filter(Post.blog_id == blog_id)
    return query


def create_post(blog_id, title, short_description, content):
    post = Post(
        blog_id=blog_id,
        title=title,
        short_description=short_description,
        content=content,
    )
    db.session.add(post)
    db.session.commit()
    return post


def update_post(post_id: int, blog_id, title, short_description, content) -> bool:
    updated = (
        _active()
        .filter(Post.id == post_id)
        .update(
            {
                Post.blog_id: blog_id,
                Post.title: title,
                Post.short_description: short_description,
                Post.content: content,
            },
            synchronize_session=False,
        )
    )
    db.session.commit()
    return updated == 1


def soft_delete_post(post_id: int) -> bool:
    updated = (
        _active()
        .filter(Post.id == post_id)
        .update({Post.is_deleted: True}, synchronize_session=False)
    )
    db.session.commit()
    return updated == 1


def delete_all_posts():
    Post.query.delete(synchronize_session=False)
    db.session.commit()
