from blog_api.common.time import to_iso
from blog_api.repositories import blog_repository, post_repository


def serialize_blog(blog):
    return {
        "id": str(blog.id),
        "name": blog.name,
        "description": blog.description,
        "websiteUrl": blog.website_url,
        "createdAt": to_iso(blog.created_at),
        "isMembership": blog.is_membership,
    }


def find_blog_by_id(blog_id: int):
    return blog_repository.find_blog_by_id(blog_id)


def find_blogs_query(search_name_term=None):
    return blog_repository.find_blogs_query(search_name_term)


def create_blog(name, description, website_url):
    blog = blog_repository.create_blog(name, description, website_url)
    return serialize_blog(blog)


def update_blog(blog_id: int, name, description, website_url) -> bool:
    return blog_repository.update_blog(blog_id, name, description, website_url)


def delete_blog(blog_id: int) -> bool:
    return blog_repository.soft_delete_blog(blog_id)


def find_blog_posts_query(blog_id: int):
    if not blog_repository.find_blog_by_id(blog_id):
        raise ValueError("Blog not found")
    return post_repository.find_posts_query(blog_id=blog_id)
