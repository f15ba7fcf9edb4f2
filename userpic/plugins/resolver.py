"""Avatar source resolution."""

import logging

from config import settings
from userpic.models.avatar import AvatarRequest, SourceKind
from userpic.models.image import ImageSource
from userpic.plugins.gravatar import resolve_remote_source

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = ImageSource(uri=settings.DEFAULT_SOURCE_URI)


class AvatarResolver:
    """Chooses the image an avatar shows.

    Priority is explicit source, then the remote source derived from the email,
    then the default source. A load failure on an explicit or remote image
    drops to the default source until one of the keyed inputs changes.

    The resolved source is cached by the (source, size, email, defaultSource)
    tuple. Each new resolution bumps the generation, so signals that belong to
    an older resolution can be told apart and dropped.
    """

    def __init__(self, request: AvatarRequest = None):
        """Initialize the resolver."""
        self.key = None
        self.generation = 0
        self.avatar_source: ImageSource = None
        self.avatar_kind: SourceKind = None
        self.default_source: ImageSource = DEFAULT_SOURCE
        self.image_source: ImageSource = None
        self.kind: SourceKind = None
        self.failed = False
        if request is not None:
            self.update(request)

    def _resolve(self, request: AvatarRequest):
        if request.source:
            return SourceKind.explicit, request.source
        if request.email:
            return SourceKind.remote, resolve_remote_source(request.size, request.email)
        return SourceKind.default, self.default_source

    def update(self, request: AvatarRequest) -> bool:
        """Apply new props. Returns True when the source was resolved again."""
        key = request.source_key()
        if key == self.key:
            return False

        self.key = key
        self.default_source = request.defaultSource or DEFAULT_SOURCE
        self.avatar_kind, self.avatar_source = self._resolve(request)
        self.kind, self.image_source = self.avatar_kind, self.avatar_source
        self.failed = False
        self.generation += 1
        logger.debug(f"Resolved {self.kind.value} source, generation {self.generation}")
        return True

    def report_load_failure(self, generation: int = None) -> bool:
        """Handle a failed image load.

        Returns True when the resolver fell back to the default source.
        """
        if generation is not None and generation != self.generation:
            logger.warning(
                f"Ignoring load failure for stale generation {generation} "
                f"(current {self.generation})"
            )
            return False

        if self.kind not in (SourceKind.explicit, SourceKind.remote):
            return False

        logger.info(f"Loading {self.kind.value} source failed, falling back to default")
        self.kind, self.image_source = SourceKind.default, self.default_source
        self.failed = True
        return True

    @property
    def on_default(self) -> bool:
        """Whether the current image is the default source."""
        return self.image_source is not None and self.image_source == self.default_source
