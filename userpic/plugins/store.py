"""In-memory registry of mounted avatars."""

import logging

from userpic.models.avatar import AvatarRequest
from userpic.plugins.userpic import Userpic

logger = logging.getLogger(__name__)


class AvatarError(Exception):
    """Base avatar error."""


class UnknownAvatarError(AvatarError):
    """Raised when an avatar id was never mounted."""


class AvatarStore:
    """Keeps one Userpic per avatar id.

    Each avatar owns its resolver and badge animation; nothing is shared
    between entries.
    """

    _instance = None

    def __new__(cls):
        """Singleton pattern to share one registry across routers."""
        if cls._instance is None:
            cls._instance = super(AvatarStore, cls).__new__(cls)
            cls._instance.avatars = {}
        return cls._instance

    def mount(self, avatar_id: str, request: AvatarRequest) -> Userpic:
        """Create the avatar, or update its props when it already exists."""
        if avatar := self.avatars.get(avatar_id):
            avatar.update(request)
            return avatar
        logger.info(f"Mounting avatar {avatar_id}")
        self.avatars[avatar_id] = Userpic(request)
        return self.avatars[avatar_id]

    def get(self, avatar_id: str) -> Userpic:
        """Fetch a mounted avatar."""
        if not (avatar := self.avatars.get(avatar_id)):
            raise UnknownAvatarError(f"Unknown avatar {avatar_id}")
        return avatar

    def unmount(self, avatar_id: str) -> bool:
        """Forget an avatar. Returns False when it was not mounted."""
        if self.avatars.pop(avatar_id, None) is None:
            return False
        logger.info(f"Unmounted avatar {avatar_id}")
        return True

    def clear(self):
        """Forget every avatar."""
        self.avatars.clear()
