from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, current_user

from blog_api.common.auth import optional_user_id
from blog_api.common.http import result_response
from blog_api.common.like_status import LikeStatus
from blog_api.common.pagination import paginate
from blog_api.models.comment_model import Comment
from blog_api.schemas.comment_schema import CommentInputSchema
from blog_api.schemas.like_schema import LikeInputSchema
from blog_api.schemas.pagination_schema import PageQuerySchema
from blog_api.services import comment_service


comment_bp = Blueprint("comments", __name__)

COMMENT_SORT_COLUMNS = {
    "createdAt": Comment.created_at,
    "content": Comment.content,
    "likesCount": Comment.likes_count,
    "dislikesCount": Comment.dislikes_count,
}


@comment_bp.route("/comments/<int:comment_id>", methods=["GET"])
def get_comment(comment_id):
    viewer_id = optional_user_id()
    comment = comment_service.get_comment_view(comment_id, viewer_id)
    if not comment:
        return jsonify({"error": "Comment not found"}), 404
    return jsonify(comment), 200


@comment_bp.route("/comments/<int:comment_id>", methods=["PUT"])
@jwt_required()
def update_comment(comment_id):
    data = CommentInputSchema().load(request.get_json(silent=True) or {})
    result = comment_service.update_comment(comment_id, current_user.id, data["content"])
    return result_response(result)


@comment_bp.route("/comments/<int:comment_id>", methods=["DELETE"])
@jwt_required()
def delete_comment(comment_id):
    result = comment_service.delete_comment(comment_id, current_user.id)
    return result_response(result)


@comment_bp.route("/comments/<int:comment_id>/like-status", methods=["PUT"])
@jwt_required()
def update_comment_like_status(comment_id):
    data = LikeInputSchema().load(request.get_json(silent=True) or {})
    result = comment_service.set_like_status(
        comment_id, current_user.id, LikeStatus(data["likeStatus"])
    )
    return result_response(result)


@comment_bp.route("/posts/<int:post_id>/comments", methods=["POST"])
@jwt_required()
def create_comment(post_id):
    data = CommentInputSchema().load(request.get_json(silent=True) or {})
    result = comment_service.create_comment(post_id, current_user.id, data["content"])
    return result_response(result, success_status=201)


@comment_bp.route("/posts/<int:post_id>/comments", methods=["GET"])
def list_post_comments(post_id):
    viewer_id = optional_user_id()
    params = PageQuerySchema().load(request.args)

    try:
        query = comment_service.find_post_comments_query(post_id)
    except ValueError as e:
        return jsonify({"error": str(e)}), 404

    page = paginate(
        query,
        params,
        COMMENT_SORT_COLUMNS,
        lambda comments: comment_service.serialize_comments(comments, viewer_id),
    )
    return jsonify(page), 200
