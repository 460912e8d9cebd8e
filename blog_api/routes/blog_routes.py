from flask import Blueprint, request, jsonify

from blog_api.common.auth import basic_auth_required
from blog_api.common.pagination import paginate
from blog_api.models.blog_model import Blog
from blog_api.routes.post_routes import POST_SORT_COLUMNS, serialize_posts
from blog_api.schemas.blog_schema import BlogInputSchema
from blog_api.schemas.pagination_schema import BlogsQuerySchema, PageQuerySchema
from blog_api.schemas.post_schema import BlogPostInputSchema
from blog_api.services import blog_service, post_service

blog_bp = Blueprint("blogs", __name__)

BLOG_SORT_COLUMNS = {
    "createdAt": Blog.created_at,
    "name": Blog.name,
    "description": Blog.description,
    "websiteUrl": Blog.website_url,
}


@blog_bp.route("/blogs", methods=["GET"])
def list_blogs():
    params = BlogsQuerySchema().load(request.args)
    query = blog_service.find_blogs_query(params["searchNameTerm"])
    page = paginate(
        query,
        params,
        BLOG_SORT_COLUMNS,
        lambda blogs: [blog_service.serialize_blog(blog) for blog in blogs],
    )
    return jsonify(page), 200


@blog_bp.route("/blogs/<int:blog_id>", methods=["GET"])
def get_blog(blog_id):
    blog = blog_service.find_blog_by_id(blog_id)
    if not blog:
        return jsonify({"error": "Blog not found"}), 404
    return jsonify(blog_service.serialize_blog(blog)), 200


@blog_bp.route("/blogs", methods=["POST"])
@basic_auth_required
def create_blog():
    data = BlogInputSchema().load(request.get_json(silent=True) or {})
    blog = blog_service.create_blog(data["name"], data["description"], data["websiteUrl"])
    return jsonify(blog), 201


@blog_bp.route("/blogs/<int:blog_id>", methods=["PUT"])
@basic_auth_required
def update_blog(blog_id):
    data = BlogInputSchema().load(request.get_json(silent=True) or {})
    if not blog_service.update_blog(blog_id, data["name"], data["description"], data["websiteUrl"]):
        return jsonify({"error": "Blog not found"}), 404
    return "", 204


@blog_bp.route("/blogs/<int:blog_id>", methods=["DELETE"])
@basic_auth_required
def delete_blog(blog_id):
    if not blog_service.delete_blog(blog_id):
        return jsonify({"error": "Blog not found"}), 404
    return "", 204


@blog_bp.route("/blogs/<int:blog_id>/posts", methods=["GET"])
def list_blog_posts(blog_id):
    params = PageQuerySchema().load(request.args)

    try:
        query = blog_service.find_blog_posts_query(blog_id)
    except ValueError as e:
        return jsonify({"error": str(e)}), 404

    return jsonify(paginate(query, params, POST_SORT_COLUMNS, serialize_posts)), 200


@blog_bp.route("/blogs/<int:blog_id>/posts", methods=["POST"])
@basic_auth_required
def create_blog_post(blog_id):
    data = BlogPostInputSchema().load(request.get_json(silent=True) or {})

    try:
        post = post_service.create_post(
            blog_id,
            data["title"],
            data["shortDescription"],
            data["content"],
        )
    except ValueError as e:
        return jsonify({"error": str(e)}), 404
    return jsonify(post), 201
