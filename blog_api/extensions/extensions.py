from flask import current_app
from flask_jwt_extended import JWTManager
from flask_marshmallow import Marshmallow

from blog_api.repositories.user_repository import find_user_by_id

ma = Marshmallow()
jwt = JWTManager()


@jwt.user_lookup_loader
def load_user(_jwt_header, jwt_data):
    # soft-deleted users resolve to None, which rejects their tokens
    return find_user_by_id(int(jwt_data[current_app.config["JWT_IDENTITY_CLAIM"]]))
