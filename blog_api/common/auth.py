import hmac
import logging
from functools import wraps

from flask import current_app, jsonify, request
from flask_jwt_extended import get_current_user, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

logger = logging.getLogger(__name__)


def basic_auth_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        auth = request.authorization
        if (
            auth is None
            or auth.type != "basic"
            or not hmac.compare_digest(auth.username or "", current_app.config["ADMIN_LOGIN"])
            or not hmac.compare_digest(auth.password or "", current_app.config["ADMIN_PASSWORD"])
        ):
            return jsonify({"error": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper


def optional_user_id():
    """Id of the bearer-authenticated caller, or None for anonymous requests.

    Expired, malformed or orphaned tokens read as anonymous.
    """
    try:
        verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError) as error:
        logger.debug("Ignoring invalid bearer token on optional auth: %s", error)
        return None
    user = get_current_user()
    return user.id if user is not None else None
