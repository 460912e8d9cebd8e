from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from blog_api.common.like_status import LikeStatus
from blog_api.db import db


class ReactionAlreadyExists(Exception):
    pass


@dataclass(frozen=True)
class UpdateInfo:
    matched: bool
    modified: bool


class ReactionStore:
    """Per-(user, target) reaction rows for one reactable entity kind.

    ``model`` must expose ``user_id``, ``target_id``, ``status`` and
    ``created_at`` columns with a unique constraint on the user/target pair.
    Every mutating call commits on its own.
    """

    def __init__(self, model):
        self.model = model

    def _pair(self, user_id: int, target_id: int):
        return self.model.query.filter_by(user_id=user_id, target_id=target_id)

    def find_reaction(self, user_id: int, target_id: int):
        return self._pair(user_id, target_id).first()

    def find_reactions_of_user(self, user_id: int, target_ids):
        if not target_ids:
            return {}
        rows = self.model.query.filter(
            self.model.user_id == user_id,
            self.model.target_id.in_(target_ids),
        ).all()
        return {row.target_id: row for row in rows}

    def create_reaction(self, user_id: int, target_id: int,
                        status: LikeStatus, timestamp: datetime) -> int:
        reaction = self.model(
            user_id=user_id,
            target_id=target_id,
            status=status.value,
            created_at=timestamp,
        )
        db.session.add(reaction)
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise ReactionAlreadyExists(
                f"Reaction of user {user_id} on {target_id} already exists"
            ) from e
        return reaction.id

    def update_reaction_status(self, user_id: int, target_id: int,
                               status: LikeStatus) -> UpdateInfo:
        modified = (
            self._pair(user_id, target_id)
            .filter(self.model.status != status.value)
            .update({self.model.status: status.value}, synchronize_session=False)
        )
        db.session.commit()
        if modified:
            return UpdateInfo(matched=True, modified=True)

        matched = self._pair(user_id, target_id).count() > 0
        return UpdateInfo(matched=matched, modified=False)

    def update_reaction_timestamp(self, user_id: int, target_id: int,
                                  timestamp: datetime) -> bool:
        matched = (
            self._pair(user_id, target_id)
            .update({self.model.created_at: timestamp}, synchronize_session=False)
        )
        db.session.commit()
        return matched == 1

    def delete_reaction(self, user_id: int, target_id: int):
        self._pair(user_id, target_id).delete(synchronize_session=False)
        db.session.commit()

    def count_by_status(self, target_id: int, status: LikeStatus) -> int:
        return (
            db.session.query(func.count(self.model.id))
            .filter(
                self.model.target_id == target_id,
                self.model.status == status.value,
            )
            .scalar()
        )

    def delete_all_reactions_of_user(self, user_id: int) -> list[int]:
        target_ids = [
            row[0]
            for row in db.session.query(self.model.target_id)
            .filter(self.model.user_id == user_id)
            .distinct()
            .all()
        ]
        self.model.query.filter_by(user_id=user_id).delete(synchronize_session=False)
        db.session.commit()
        return target_ids

    def delete_all_reactions_of_target(self, target_id: int):
        self.model.query.filter_by(target_id=target_id).delete(synchronize_session=False)
        db.session.commit()

    def delete_all(self):
        self.model.query.delete(synchronize_session=False)
        db.session.commit()
