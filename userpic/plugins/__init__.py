from .badge import BadgeEngine, ScaleAnimation
from .resolver import AvatarResolver
from .store import AvatarError, AvatarStore, UnknownAvatarError
from .userpic import Userpic

__all__ = [
    "AvatarError",
    "AvatarResolver",
    "AvatarStore",
    "BadgeEngine",
    "ScaleAnimation",
    "UnknownAvatarError",
    "Userpic",
]
