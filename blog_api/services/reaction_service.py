import logging
from datetime import datetime

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from blog_api.common.like_status import LikeStatus
from blog_api.common.result import Result
from blog_api.db import db
from blog_api.repositories.reaction_repository import ReactionAlreadyExists, ReactionStore
from blog_api.services.reaction_targets import ReactionTarget

logger = logging.getLogger(__name__)

EXTENSION_KEY = "comment_reactions"


class RecountService:
    """Recomputes the cached like/dislike counters of a target.

    Counts are always derived from the stored reactions, never adjusted in
    place, so a recount is safe to repeat.
    """

    def __init__(self, store: ReactionStore, target: ReactionTarget):
        self.store = store
        self.target = target

    def recount(self, target_id: int) -> Result:
        try:
            if not self.target.exists(target_id):
                return Result.success()

            # Two separate counts; a concurrent change between them is
            # corrected by the next recount.
            likes = self.store.count_by_status(target_id, LikeStatus.LIKE)
            dislikes = self.store.count_by_status(target_id, LikeStatus.DISLIKE)

            if not self.target.set_aggregate_counts(target_id, likes, dislikes):
                logger.info("Target %s disappeared before recount was stored", target_id)
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Recount failed for target %s", target_id)
            return Result.internal_error()

        logger.debug("Recounted target %s: likes=%s dislikes=%s", target_id, likes, dislikes)
        return Result.success()


class ReactionLedgerService:
    """Applies like/dislike/none intents with at most one reaction per user and target."""

    def __init__(self, store: ReactionStore, target: ReactionTarget,
                 recount_service: RecountService, clock=datetime.utcnow):
        self.store = store
        self.target = target
        self.recount_service = recount_service
        self.clock = clock

    def set_reaction(self, user_id: int, target_id: int, status: LikeStatus) -> Result:
        status = LikeStatus(status)
        try:
            if not self.target.exists(target_id):
                return Result.not_found()

            existing = self.store.find_reaction(user_id, target_id)
            result, changed = self._apply(existing, user_id, target_id, status)
        except (SQLAlchemyError, ReactionAlreadyExists):
            db.session.rollback()
            logger.exception(
                "Reaction mutation failed for user %s on target %s", user_id, target_id
            )
            return Result.internal_error()

        if not result.ok or not changed:
            return result

        return self.recount_service.recount(target_id)

    def _apply(self, existing, user_id: int, target_id: int, status: LikeStatus):
        """Run one transition; returns (result, whether counts may have changed)."""
        if existing is None:
            if status is LikeStatus.NONE:
                return Result.success(), False

            self.store.create_reaction(user_id, target_id, status, self.clock())
            logger.debug("User %s set %s on %s", user_id, status.value, target_id)
            return Result.success(), True

        current = LikeStatus(existing.status)
        if status is LikeStatus.NONE:
            self.store.delete_reaction(user_id, target_id)
            logger.debug("User %s removed %s on %s", user_id, current.value, target_id)
            return Result.success(), True

        if status is current:
            return Result.success(), False

        update_info = self.store.update_reaction_status(user_id, target_id, status)
        if not update_info.matched:
            logger.warning(
                "Reaction of user %s on %s vanished during update", user_id, target_id
            )
            return Result.internal_error(), False

        if update_info.modified and not self.store.update_reaction_timestamp(
            user_id, target_id, self.clock()
        ):
            return Result.internal_error(), False

        logger.debug(
            "User %s switched %s -> %s on %s",
            user_id, current.value, status.value, target_id,
        )
        return Result.success(), update_info.modified

    def viewer_reaction_status(self, user_id: int | None, target_id: int) -> LikeStatus:
        if user_id is None:
            return LikeStatus.NONE
        reaction = self.store.find_reaction(user_id, target_id)
        return LikeStatus(reaction.status) if reaction else LikeStatus.NONE

    def viewer_reaction_statuses(self, user_id: int | None, target_ids) -> dict:
        if user_id is None:
            return {target_id: LikeStatus.NONE for target_id in target_ids}
        reactions = self.store.find_reactions_of_user(user_id, list(target_ids))
        return {
            target_id: LikeStatus(reactions[target_id].status)
            if target_id in reactions else LikeStatus.NONE
            for target_id in target_ids
        }

    def remove_user_reactions(self, user_id: int) -> Result:
        """Drop every reaction of a user and refresh the counters they touched."""
        try:
            target_ids = self.store.delete_all_reactions_of_user(user_id)
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Could not remove reactions of user %s", user_id)
            return Result.internal_error()

        for target_id in target_ids:
            result = self.recount_service.recount(target_id)
            if not result.ok:
                return result
        logger.info("Removed reactions of user %s on %d targets", user_id, len(target_ids))
        return Result.success()

    def remove_target_reactions(self, target_id: int) -> Result:
        try:
            self.store.delete_all_reactions_of_target(target_id)
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Could not remove reactions on target %s", target_id)
            return Result.internal_error()
        return Result.success()

    def remove_all(self) -> Result:
        try:
            self.store.delete_all()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Could not remove all reactions")
            return Result.internal_error()
        return Result.success()


def get_comment_reactions() -> ReactionLedgerService:
    return current_app.extensions[EXTENSION_KEY]
