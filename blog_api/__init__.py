import logging

from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from blog_api.common.result import errors_payload
from blog_api.common.validation import field_errors_from_messages
from blog_api.config import Config
from blog_api.db import db
from blog_api.extensions.extensions import jwt, ma
from blog_api.models.comment_like_model import CommentLike
from blog_api.repositories.reaction_repository import ReactionStore
from blog_api.services.reaction_service import EXTENSION_KEY, ReactionLedgerService, RecountService
from blog_api.services.reaction_targets import CommentReactionTarget

logger = logging.getLogger(__name__)


def _configure_logging(app):
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _register_reactions(app):
    store = ReactionStore(CommentLike)
    target = CommentReactionTarget()
    app.extensions[EXTENSION_KEY] = ReactionLedgerService(
        store=store,
        target=target,
        recount_service=RecountService(store, target),
    )


def _register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        errors = field_errors_from_messages(error.messages)
        return jsonify(errors_payload(errors)), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code


def _register_blueprints(app):
    from blog_api.routes.auth_routes import auth_bp
    from blog_api.routes.blog_routes import blog_bp
    from blog_api.routes.comment_routes import comment_bp
    from blog_api.routes.post_routes import post_bp
    from blog_api.routes.testing_routes import testing_bp
    from blog_api.routes.user_routes import user_bp

    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(blog_bp, url_prefix="/api")
    app.register_blueprint(post_bp, url_prefix="/api")
    app.register_blueprint(comment_bp, url_prefix="/api")
    app.register_blueprint(user_bp, url_prefix="/api")

    if app.config["TESTING_ROUTES_ENABLED"]:
        app.register_blueprint(testing_bp, url_prefix="/api")


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app)

    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)

    _register_reactions(app)
    _register_error_handlers(app)
    _register_blueprints(app)

    with app.app_context():
        db.create_all()

    logger.info("Application created (database %s)", app.config["SQLALCHEMY_DATABASE_URI"])
    return app
