from blog_api.db import db
from blog_api.models.blog_model import Blog


def _active():
    return Blog.query.filter(Blog.is_deleted.is_(False))


def find_blog_by_id(blog_id: int):
    return _active().filter(Blog.id == blog_id).first()


def find_blogs_query(search_name_term=None):
    query = _active()
    if search_name_term:
        query = query.filter(Blog.name.ilike(f"%{search_name_term}%"))
    return query


def create_blog(name, description, website_url):
    blog = Blog(
        name=name,
        description=description,
        website_url=website_url,
    )
    db.session.add(blog)
    db.session.commit()
    return blog


def update_blog(blog_id: int, name, description, website_url) -> bool:
    updated = (
        _active()
        .filter(Blog.id == blog_id)
        .update(
            {
                Blog.name: name,
                Blog.description: description,
                Blog.website_url: website_url,
            },
            synchronize_session=False,
        )
    )
    db.session.commit()
    return updated == 1


def soft_delete_blog(blog_id: int) -> bool:
    updated = (
        _active()
        .filter(Blog.id == blog_id)
        .update({Blog.is_deleted: True}, synchronize_session=False)
    )
    db.session.commit()
    return updated == 1


def delete_all_blogs():
    Blog.query.delete(synchronize_session=False)
    db.session.commit()
