from datetime import datetime

from blog_api.db import db


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    blog_id = db.Column(
        db.Integer,
        db.ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False
    )
    title = db.Column(db.String(30), nullable=False)
    short_description = db.Column(db.String(100), nullable=False)
    content = db.Column(db.String(1000), nullable=False)
    is_deleted = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    blog = db.relationship("Blog", lazy="joined")
