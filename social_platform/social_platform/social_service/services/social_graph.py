"""
Social graph service: follow, unfollow and the most-followed ranking.

Each follow/unfollow changes the edge set and the target's follower counter
inside one transaction. The counter is moved with a single SQL update so
concurrent requests never overwrite each other's increments.
"""
import logging
from typing import List

from sqlalchemy import update
from sqlalchemy.orm import Session, selectinload

from ..auth import Identity
from ..errors import AlreadyFollowingError, UserNotFoundError
from ..models import User
from .common import require_user_id, service_operation

logger = logging.getLogger(__name__)


class SocialGraphService:
    def __init__(self, db: Session):
        self.db = db

    @service_operation("Error following user")
    def follow_user(self, identity: Identity, target_id: int) -> None:
        user_id = require_user_id(identity)
        user, target = self._load_pair(user_id, target_id)

        if any(followed.id == target.id for followed in user.following):
            raise AlreadyFollowingError()

        user.following.append(target)
        self.db.execute(
            update(User)
            .where(User.id == target.id)
            .values(followers_count=User.followers_count + 1)
        )
        self.db.commit()
        logger.info("User %s followed user %s", user_id, target.id)

    @service_operation("Error unfollowing user")
    def unfollow_user(self, identity: Identity, target_id: int) -> None:
        """
        Remove the follow edge to ``target_id``.

        Unfollowing a user that is not followed is not an error. The
        counter only moves when an edge was removed and never drops below 0.
        Earlier releases decremented any positive counter even without an
        edge; that let the counter drift from the follower set.
        """
        user_id = require_user_id(identity)
        user, target = self._load_pair(user_id, target_id)

        followed = [u for u in user.following if u.id == target.id]
        if not followed:
            logger.debug("User %s does not follow user %s; nothing to remove", user_id, target.id)
            return

        for edge in followed:
            user.following.remove(edge)
        self.db.execute(
            update(User)
            .where(User.id == target.id, User.followers_count > 0)
            .values(followers_count=User.followers_count - 1)
        )
        self.db.commit()
        logger.info("User %s unfollowed user %s", user_id, target.id)

    @service_operation("Error fetching most followed users")
    def most_followed(self) -> List[dict]:
        rows = (
            self.db.query(User.id, User.username, User.followers_count)
            .order_by(User.followers_count.desc())
            .all()
        )
        return [
            {"id": row.id, "username": row.username, "followersCount": row.followers_count}
            for row in rows
        ]

    def _load_pair(self, user_id: int, target_id: int):
        user = (
            self.db.query(User)
            .options(selectinload(User.following))
            .filter(User.id == user_id)
            .first()
        )
        target = self.db.query(User).filter(User.id == target_id).first()
        if not target or not user:
            raise UserNotFoundError()
        return user, target
