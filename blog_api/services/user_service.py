import logging

from werkzeug.security import generate_password_hash

from blog_api.common.result import FieldError, Result, ResultStatus
from blog_api.repositories import user_repository
from blog_api.services.reaction_service import get_comment_reactions

logger = logging.getLogger(__name__)


def create_user(login, email, password) -> Result:
    if user_repository.get_by_login(login):
        return Result.bad_request(FieldError("login", "Login must be unique"))
    if user_repository.get_by_email(email):
        return Result.bad_request(FieldError("email", "Email must be unique"))

    user = user_repository.create_user(
        login=login,
        email=email,
        password_hash=generate_password_hash(password),
    )
    logger.info("Created user %s (%s)", user.id, user.login)
    return Result(ResultStatus.CREATED, user.to_dict())


def delete_user(user_id: int) -> Result:
    if not user_repository.soft_delete_user(user_id):
        return Result.not_found()

    logger.info("Deleted user %s", user_id)
    return get_comment_reactions().remove_user_reactions(user_id)


def find_users_query(search_login_term=None, search_email_term=None):
    return user_repository.find_users_query(search_login_term, search_email_term)
