from werkzeug.security import check_password_hash
from flask_jwt_extended import create_access_token, create_refresh_token

from blog_api.repositories import user_repository
from blog_api.services import user_service


def register(login, email, password):
    return user_service.create_user(login, email, password)


def login(login_or_email, password):
    user = user_repository.get_by_login_or_email(login_or_email.strip())
    if not user or not check_password_hash(user.password_hash, password):
        raise ValueError("Invalid credentials")

    identity = str(user.id)
    return {
        "accessToken": create_access_token(identity=identity),
        "refreshToken": create_refresh_token(identity=identity),
    }


def refresh_access_token(user_id):
    return {
        "accessToken": create_access_token(identity=str(user_id))
    }


def me(user):
    return {
        "email": user.email,
        "login": user.login,
        "userId": str(user.id),
    }
