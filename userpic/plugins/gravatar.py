"""Remote avatar lookup keyed by email."""

import hashlib
import logging

from config import settings
from userpic.models.image import ImageSource
from userpic.utilities import pixel_size_for_layout

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Trim and lowercase an email so equal addresses share a lookup key."""
    return (email or "").strip().lower()


def email_digest(email: str) -> str:
    """MD5 hex digest of the normalized email."""
    return hashlib.md5(normalize_email(email).encode("utf-8")).hexdigest()


def gravatar_uri(size: float, email: str, ratio: float = None) -> str:
    """Build the remote image address for an email.

    The address is byte stable for an (email, size) pair so the remote service
    can cache it. Malformed addresses are not rejected: they hash like any
    other string and the remote side answers with its blank image.
    """
    pixels = pixel_size_for_layout(size, ratio)
    return f"{settings.GRAVATAR_URL}/{email_digest(email)}?s={pixels}&d={settings.GRAVATAR_DEFAULT}"


def resolve_remote_source(size: float, email: str, ratio: float = None) -> ImageSource:
    """Image source for the remote avatar of an email."""
    source = ImageSource(uri=gravatar_uri(size, email, ratio))
    logger.debug(f"Remote source for size {size}: {source.uri}")
    return source
