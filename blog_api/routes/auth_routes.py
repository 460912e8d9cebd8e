from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, current_user

from blog_api.common.http import result_response
from blog_api.schemas.user_schema import LoginInputSchema, UserInputSchema
from blog_api.services import auth_service


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/auth/login", methods=["POST"])
def login():
    data = LoginInputSchema().load(request.get_json(silent=True) or {})

    try:
        tokens = auth_service.login(data["loginOrEmail"], data["password"])
        return jsonify(tokens), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 401


@auth_bp.route("/auth/refresh-token", methods=["POST"])
@jwt_required(refresh=True)
def refresh_token():
    return jsonify(auth_service.refresh_access_token(current_user.id)), 200


@auth_bp.route("/auth/registration", methods=["POST"])
def registration():
    data = UserInputSchema().load(request.get_json(silent=True) or {})
    result = auth_service.register(data["login"], data["email"], data["password"])
    if result.ok:
        return "", 204
    return result_response(result)


@auth_bp.route("/auth/me", methods=["GET"])
@jwt_required()
def me():
    return jsonify(auth_service.me(current_user)), 200
