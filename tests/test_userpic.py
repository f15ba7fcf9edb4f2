import base64
import hashlib

from userpic.avatar_generator import pick_color
from userpic.models.avatar import AvatarPresentation, AvatarRequest, SourceKind
from userpic.models.image import ImageSource
from userpic.plugins import Userpic
from userpic.plugins.resolver import DEFAULT_SOURCE
from userpic.utilities import default_color

EXPLICIT = ImageSource(uri="https://example.com/jane.png")


def test_remote_scenario():
    avatar = Userpic(AvatarRequest(size=50, email="A@B.com "))
    resolved = avatar.resolve()
    assert resolved.effectiveSourceKind == SourceKind.remote
    assert hashlib.md5(b"a@b.com").hexdigest() in resolved.effectiveSource.uri


def test_remote_failure_with_name_shows_initials():
    avatar = Userpic(AvatarRequest(size=50, email="A@B.com ", name="Jane Doe"))
    assert avatar.resolve().effectiveSourceKind == SourceKind.remote

    assert avatar.report_load_failure()
    resolved = avatar.resolve()
    assert resolved.effectiveSourceKind == SourceKind.initials
    assert resolved.effectiveSource is None
    assert resolved.initials == "JD"

    presentation = avatar.render()
    assert presentation.kind == AvatarPresentation.Kind.initials
    assert presentation.source is None
    svg = base64.b64decode(presentation.initialsSvg.split(",", 1)[1]).decode("utf-8")
    assert ">JD</text>" in svg


def test_remote_failure_without_name_shows_default_image():
    avatar = Userpic(AvatarRequest(email="jane@example.com"))
    avatar.report_load_failure()
    presentation = avatar.render()
    assert presentation.kind == AvatarPresentation.Kind.image
    assert presentation.resolved.effectiveSourceKind == SourceKind.default
    assert presentation.source == DEFAULT_SOURCE


def test_name_without_sources_shows_initials():
    presentation = Userpic(AvatarRequest(name="Jane Doe")).render()
    assert presentation.kind == AvatarPresentation.Kind.initials
    assert presentation.initials == "JD"


def test_explicit_source_with_name_shows_image():
    presentation = Userpic(AvatarRequest(name="Jane Doe", source=EXPLICIT)).render()
    assert presentation.kind == AvatarPresentation.Kind.image
    assert presentation.source == EXPLICIT


def test_colorize_picks_palette_color():
    presentation = Userpic(AvatarRequest(name="Jane Doe", colorize=True)).render()
    assert presentation.resolved.derivedColor == pick_color("Jane Doe")
    assert presentation.initialsColor == pick_color("Jane Doe")


def test_initials_use_background_without_colorize():
    presentation = Userpic(AvatarRequest(name="Jane Doe", color="#123456")).render()
    assert presentation.resolved.derivedColor is None
    assert presentation.initialsColor == "#123456"
    assert presentation.backgroundColor == "#123456"


def test_default_background_color():
    assert Userpic(AvatarRequest()).render().backgroundColor == default_color()


def test_name_change_rerenders_initials_only():
    avatar = Userpic(AvatarRequest(email="jane@example.com", name="Jane Doe"))
    avatar.report_load_failure()
    generation = avatar.generation

    assert not avatar.update(AvatarRequest(email="jane@example.com", name="John Smith"))
    assert avatar.generation == generation
    assert avatar.resolve().initials == "JS"


def test_email_change_escapes_initials():
    avatar = Userpic(AvatarRequest(email="jane@example.com", name="Jane Doe"))
    avatar.report_load_failure()
    assert avatar.update(AvatarRequest(email="john@example.com", name="Jane Doe"))
    assert avatar.resolve().effectiveSourceKind == SourceKind.remote


def test_border_radius():
    assert Userpic(AvatarRequest(size=50)).border_radius == 25
    assert Userpic(AvatarRequest(size=50, radius=100)).border_radius == 25
    assert Userpic(AvatarRequest(size=50, radius=10)).border_radius == 10
    assert Userpic(AvatarRequest(size=50, radius=-4)).border_radius == 0


def test_badge_defaults_to_top_right_of_avatar():
    avatar = Userpic(AvatarRequest(size=50, badge=3, badgeColor="#f00"))
    spec = avatar.badge_spec()
    assert spec.parentRadius == 25
    assert spec.position == "top-right"
    assert spec.color == "#f00"

    badge = avatar.render().badge
    assert set(badge.anchors) == {"top", "right"}
    assert badge.displayText == "3"
    assert badge.backgroundColor == "#f00"


def test_badge_props_override_position():
    avatar = Userpic(
        AvatarRequest(badge=12, badgeProps={"position": "bottom-left", "limit": 99, "size": 30})
    )
    badge = avatar.render().badge
    assert set(badge.anchors) == {"bottom", "left"}
    assert badge.displayText == "12"
    assert badge.height == 30


def test_missing_or_empty_badge():
    assert Userpic(AvatarRequest()).render().badge is None
    assert Userpic(AvatarRequest(badge=0)).render().badge is None
    assert Userpic(AvatarRequest(badge="")).render().badge is None


def test_badge_appears_with_spring():
    now = [0.0]
    avatar = Userpic(AvatarRequest(badge=0), clock=lambda: now[0])
    avatar.update(AvatarRequest(badge=4))
    assert avatar.badge.animation.animating
    assert avatar.render().badge.scale == 0

    now[0] = 3.0
    badge = avatar.render().badge
    assert badge.scale == 1
    assert badge.animationPhase == "shown"


def test_badge_props_size_is_clamped():
    for size in (0, -5):
        badge = Userpic(AvatarRequest(badge=3, badgeProps={"size": size})).render().badge
        assert badge.height == 15
