import os
import tempfile
import unittest
from datetime import datetime, timedelta
from unittest.mock import patch

from sqlalchemy.exc import OperationalError


class FakeClock:
    def __init__(self, start):
        self.now = start

    def tick(self):
        self.now += timedelta(minutes=1)

    def __call__(self):
        return self.now


class ReactionTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from blog_api import create_app
        from blog_api.config import Config
        from blog_api.db import db

        class TestConfig(Config):
            TESTING = True
            SQLALCHEMY_DATABASE_URI = f"sqlite:///{cls.db_path}"
            JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"

        cls.app = create_app(TestConfig)
        cls.db = db

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            cls.db.session.remove()
            cls.db.engine.dispose()
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        from blog_api.common.like_status import LikeStatus
        from blog_api.models.comment_like_model import CommentLike
        from blog_api.repositories import (
            blog_repository,
            comment_repository,
            post_repository,
            user_repository,
        )
        from blog_api.repositories.reaction_repository import ReactionStore
        from blog_api.services.reaction_service import ReactionLedgerService, RecountService
        from blog_api.services.reaction_targets import CommentReactionTarget

        self.LikeStatus = LikeStatus
        self.comment_repository = comment_repository

        self.ctx = self.app.app_context()
        self.ctx.push()
        self.db.drop_all()
        self.db.create_all()

        self.alice = user_repository.create_user("alice", "alice@example.com", "x").id
        self.bob = user_repository.create_user("bob", "bob@example.com", "x").id
        blog = blog_repository.create_blog("blog", "description", "https://blog.com")
        post = post_repository.create_post(blog.id, "title", "short", "content")
        self.comment_id = comment_repository.create_comment(
            post.id, self.alice, "a comment that is long enough"
        ).id

        self.clock = FakeClock(datetime(2025, 1, 1, 12, 0, 0))
        self.store = ReactionStore(CommentLike)
        self.target = CommentReactionTarget()
        self.recount = RecountService(self.store, self.target)
        self.ledger = ReactionLedgerService(self.store, self.target, self.recount, clock=self.clock)

    def tearDown(self):
        self.db.session.remove()
        self.ctx.pop()

    def _counts(self):
        self.db.session.expire_all()
        comment = self.comment_repository.find_comment_by_id(self.comment_id)
        return comment.likes_count, comment.dislikes_count


class TestReactionLedger(ReactionTestCase):
    def test_missing_target_is_not_found(self):
        from blog_api.common.result import ResultStatus

        result = self.ledger.set_reaction(self.alice, 12345, self.LikeStatus.LIKE)
        self.assertEqual(result.status, ResultStatus.NOT_FOUND)
        self.assertIsNone(self.store.find_reaction(self.alice, 12345))

    def test_transitions_keep_one_row_per_user(self):
        for status in (self.LikeStatus.LIKE, self.LikeStatus.DISLIKE, self.LikeStatus.LIKE):
            self.assertTrue(self.ledger.set_reaction(self.alice, self.comment_id, status).ok)

        self.assertEqual(
            self.store.model.query.filter_by(user_id=self.alice).count(), 1
        )
        self.assertEqual(self._counts(), (1, 0))

        self.assertTrue(self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.NONE).ok)
        self.assertIsNone(self.store.find_reaction(self.alice, self.comment_id))
        self.assertEqual(self._counts(), (0, 0))

    def test_timestamp_moves_only_when_status_changes(self):
        self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE)
        first = self.store.find_reaction(self.alice, self.comment_id).created_at
        self.assertEqual(first, self.clock.now)

        self.clock.tick()
        self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE)
        self.db.session.expire_all()
        self.assertEqual(self.store.find_reaction(self.alice, self.comment_id).created_at, first)

        self.clock.tick()
        self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.DISLIKE)
        self.db.session.expire_all()
        self.assertEqual(
            self.store.find_reaction(self.alice, self.comment_id).created_at, self.clock.now
        )

    def test_repeated_status_skips_recount(self):
        self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE)

        with patch.object(self.recount, "recount") as recount:
            result = self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE)
            none_result = self.ledger.set_reaction(self.bob, self.comment_id, self.LikeStatus.NONE)

        self.assertTrue(result.ok)
        self.assertTrue(none_result.ok)
        recount.assert_not_called()

    def test_recount_failure_reports_internal_error_after_commit(self):
        from blog_api.common.result import ResultStatus

        error = OperationalError("UPDATE comments", {}, Exception("database is locked"))
        with patch.object(self.target, "set_aggregate_counts", side_effect=error):
            result = self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE)

        self.assertEqual(result.status, ResultStatus.INTERNAL_ERROR)
        # the reaction itself stays committed
        self.assertEqual(
            self.store.find_reaction(self.alice, self.comment_id).status,
            self.LikeStatus.LIKE.value,
        )
        self.assertEqual(self._counts(), (0, 0))

        # retrying re-derives the counts
        self.assertTrue(self.recount.recount(self.comment_id).ok)
        self.assertEqual(self._counts(), (1, 0))

    def test_vanished_reaction_during_update_is_internal_error(self):
        from blog_api.common.result import ResultStatus
        from blog_api.repositories.reaction_repository import UpdateInfo

        self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE)
        with patch.object(
            self.store, "update_reaction_status", return_value=UpdateInfo(matched=False, modified=False)
        ):
            result = self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.DISLIKE)

        self.assertEqual(result.status, ResultStatus.INTERNAL_ERROR)

    def test_recount_of_missing_target_succeeds(self):
        self.assertTrue(self.recount.recount(999).ok)

    def test_recount_tolerates_target_deleted_mid_way(self):
        self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE)

        with patch.object(self.target, "set_aggregate_counts", return_value=False):
            self.assertTrue(self.recount.recount(self.comment_id).ok)

    def test_viewer_status(self):
        self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.DISLIKE)

        self.assertIs(
            self.ledger.viewer_reaction_status(self.alice, self.comment_id), self.LikeStatus.DISLIKE
        )
        self.assertIs(
            self.ledger.viewer_reaction_status(self.bob, self.comment_id), self.LikeStatus.NONE
        )
        self.assertIs(
            self.ledger.viewer_reaction_status(None, self.comment_id), self.LikeStatus.NONE
        )

    def test_remove_user_reactions_recounts_touched_targets(self):
        self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE)
        self.ledger.set_reaction(self.bob, self.comment_id, self.LikeStatus.LIKE)
        self.assertEqual(self._counts(), (2, 0))

        self.assertTrue(self.ledger.remove_user_reactions(self.bob).ok)
        self.assertEqual(self._counts(), (1, 0))

    def test_remove_target_reactions_reports_storage_failure(self):
        from blog_api.common.result import ResultStatus

        self.ledger.set_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE)
        error = OperationalError("DELETE FROM comment_likes", {}, Exception("database is locked"))
        with patch.object(self.store, "delete_all_reactions_of_target", side_effect=error):
            result = self.ledger.remove_target_reactions(self.comment_id)
        self.assertEqual(result.status, ResultStatus.INTERNAL_ERROR)
        self.assertIsNotNone(self.store.find_reaction(self.alice, self.comment_id))

        self.assertTrue(self.ledger.remove_target_reactions(self.comment_id).ok)
        self.assertIsNone(self.store.find_reaction(self.alice, self.comment_id))

    def test_remove_all_reports_storage_failure(self):
        from blog_api.common.result import ResultStatus

        error = OperationalError("DELETE FROM comment_likes", {}, Exception("database is locked"))
        with patch.object(self.store, "delete_all", side_effect=error):
            self.assertEqual(self.ledger.remove_all().status, ResultStatus.INTERNAL_ERROR)
        self.assertTrue(self.ledger.remove_all().ok)


class TestReactionStore(ReactionTestCase):
    def test_create_twice_fails(self):
        from blog_api.repositories.reaction_repository import ReactionAlreadyExists

        self.store.create_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE, self.clock())
        with self.assertRaises(ReactionAlreadyExists):
            self.store.create_reaction(
                self.alice, self.comment_id, self.LikeStatus.DISLIKE, self.clock()
            )

    def test_update_reports_matched_and_modified(self):
        missing = self.store.update_reaction_status(self.alice, self.comment_id, self.LikeStatus.LIKE)
        self.assertEqual((missing.matched, missing.modified), (False, False))

        self.store.create_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE, self.clock())
        same = self.store.update_reaction_status(self.alice, self.comment_id, self.LikeStatus.LIKE)
        self.assertEqual((same.matched, same.modified), (True, False))

        changed = self.store.update_reaction_status(
            self.alice, self.comment_id, self.LikeStatus.DISLIKE
        )
        self.assertEqual((changed.matched, changed.modified), (True, True))

    def test_delete_is_idempotent(self):
        self.store.delete_reaction(self.alice, self.comment_id)
        self.store.create_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE, self.clock())
        self.store.delete_reaction(self.alice, self.comment_id)
        self.store.delete_reaction(self.alice, self.comment_id)
        self.assertIsNone(self.store.find_reaction(self.alice, self.comment_id))

    def test_count_by_status(self):
        self.store.create_reaction(self.alice, self.comment_id, self.LikeStatus.LIKE, self.clock())
        self.store.create_reaction(self.bob, self.comment_id, self.LikeStatus.DISLIKE, self.clock())

        self.assertEqual(self.store.count_by_status(self.comment_id, self.LikeStatus.LIKE), 1)
        self.assertEqual(self.store.count_by_status(self.comment_id, self.LikeStatus.DISLIKE), 1)

        self.store.delete_all_reactions_of_target(self.comment_id)
        self.assertEqual(self.store.count_by_status(self.comment_id, self.LikeStatus.LIKE), 0)


if __name__ == "__main__":
    unittest.main()
