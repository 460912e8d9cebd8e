from flask import Blueprint, request, jsonify

from blog_api.common.auth import basic_auth_required
from blog_api.common.http import result_response
from blog_api.common.pagination import paginate
from blog_api.models.user_model import User
from blog_api.schemas.pagination_schema import UsersQuerySchema
from blog_api.schemas.user_schema import UserInputSchema
from blog_api.services import user_service

user_bp = Blueprint("users", __name__)

USER_SORT_COLUMNS = {
    "createdAt": User.created_at,
    "login": User.login,
    "email": User.email,
}


@user_bp.route("/users", methods=["GET"])
@basic_auth_required
def list_users():
    params = UsersQuerySchema().load(request.args)
    query = user_service.find_users_query(params["searchLoginTerm"], params["searchEmailTerm"])
    page = paginate(
        query,
        params,
        USER_SORT_COLUMNS,
        lambda users: [user.to_dict() for user in users],
    )
    return jsonify(page), 200


@user_bp.route("/users", methods=["POST"])
@basic_auth_required
def create_user():
    data = UserInputSchema().load(request.get_json(silent=True) or {})
    result = user_service.create_user(data["login"], data["email"], data["password"])
    return result_response(result, success_status=201)


@user_bp.route("/users/<int:user_id>", methods=["DELETE"])
@basic_auth_required
def delete_user(user_id):
    result = user_service.delete_user(user_id)
    return result_response(result)
