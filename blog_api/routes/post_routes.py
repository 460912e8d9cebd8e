from flask import Blueprint, request, jsonify

from blog_api.common.auth import basic_auth_required
from blog_api.common.http import result_response
from blog_api.common.pagination import paginate
from blog_api.models.post_model import Post
from blog_api.schemas.pagination_schema import PageQuerySchema
from blog_api.schemas.post_schema import PostInputSchema
from blog_api.services import post_service

post_bp = Blueprint("posts", __name__)

POST_SORT_COLUMNS = {
    "createdAt": Post.created_at,
    "title": Post.title,
    "shortDescription": Post.short_description,
    "content": Post.content,
    "blogId": Post.blog_id,
}


def serialize_posts(posts):
    return [post_service.serialize_post(post) for post in posts]


@post_bp.route("/posts", methods=["GET"])
def list_posts():
    params = PageQuerySchema().load(request.args)
    page = paginate(post_service.find_posts_query(), params, POST_SORT_COLUMNS, serialize_posts)
    return jsonify(page), 200


@post_bp.route("/posts/<int:post_id>", methods=["GET"])
def get_post(post_id):
    post = post_service.find_post_by_id(post_id)
    if not post:
        return jsonify({"error": "Post not found"}), 404
    return jsonify(post_service.serialize_post(post)), 200


@post_bp.route("/posts", methods=["POST"])
@basic_auth_required
def create_post():
    data = PostInputSchema().load(request.get_json(silent=True) or {})

    try:
        post = post_service.create_post(
            int(data["blogId"]),
            data["title"],
            data["shortDescription"],
            data["content"],
        )
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(post), 201


@post_bp.route("/posts/<int:post_id>", methods=["PUT"])
@basic_auth_required
def update_post(post_id):
    data = PostInputSchema().load(request.get_json(silent=True) or {})

    try:
        updated = post_service.update_post(
            post_id,
            int(data["blogId"]),
            data["title"],
            data["shortDescription"],
            data["content"],
        )
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    if not updated:
        return jsonify({"error": "Post not found"}), 404
    return "", 204


@post_bp.route("/posts/<int:post_id>", methods=["DELETE"])
@basic_auth_required
def delete_post(post_id):
    return result_response(post_service.delete_post(post_id))
