from sqlalchemy import or_

from blog_api.db import db
from blog_api.models.user_model import User


def _active():
    return User.query.filter(User.is_deleted.is_(False))


def find_user_by_id(user_id: int):
    return _active().filter(User.id == user_id).first()


def get_by_login(login: str):
    return _active().filter(User.login == login).first()


def get_by_email(email: str):
    return _active().filter(User.email == email).first()


def get_by_login_or_email(login_or_email: str):
    return _active().filter(
        or_(User.login == login_or_email, User.email == login_or_email)
    ).first()


def find_users_query(search_login_term=None, search_email_term=None):
    query = _active()
    filters = []
    if search_login_term:
        filters.append(User.login.ilike(f"%{search_login_term}%"))
    if search_email_term:
        filters.append(User.email.ilike(f"%{search_email_term}%"))
    if filters:
        query = query.filter(or_(*filters))
    return query


def create_user(login, email, password_hash):
    user = User(
        login=login,
        email=email,
        password_hash=password_hash,
    )
    db.session.add(user)
    db.session.commit()
    return user


def soft_delete_user(user_id: int) -> bool:
    updated = (
        _active()
        .filter(User.id == user_id)
        .update({User.is_deleted: True}, synchronize_session=False)
    )
    db.session.commit()
    return updated == 1


def delete_all_users():
    User.query.delete(synchronize_session=False)
    db.session.commit()
