from datetime import datetime

from blog_api.db import db


class CommentLike(db.Model):
    __tablename__ = "comment_likes"

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    target_id = db.Column(
        "comment_id",
        db.Integer,
        db.ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False
    )

    status = db.Column(db.String(10), nullable=False)  # "Like" | "Dislike"

    # time of the last status change, not of the first reaction
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.UniqueConstraint(
            "user_id", "comment_id",
            name="unique_user_comment_like"
        ),
        db.Index("ix_comment_likes_comment_status", "comment_id", "status"),
    )
