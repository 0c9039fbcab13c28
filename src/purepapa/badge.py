"""Badge drawn in the corner of every thumbnail"""
from .enums import ImageOrigin
from .image import CanonicalImage

BADGE_WIDTH = 13
BADGE_HEIGHT = 16

# RGBA, top row first
BADGE_PIXELS = (
    b"\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031"
    b"\377\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031\377\000\000"
    b"\000\000\000\000\000\000\032\031\031\377\377\377\377\377\377\377\377\377\377\377\377\377"
    b"\377\377\377\377\377\377\377\377\377\377\377\377\377\377\377\377\377\377"
    b"\377\377\032\031\031\377\305\330\353\377\032\031\031\377\000\000\000\000\032\031\031\377\377"
    b"\377\377\377\006\031I\377\006\032I\377\006\032H\377\006\032H\377\006\031I\377\006\031H\377"
    b"\377\377\377\377\032\031\031\377\305\330\353\377\305\330\353\377\032\031\031\377"
    b"\032\031\031\377\377\377\377\377\010\036L\377\010\036L\377\010\036L\377\010\036L\377"
    b"\010\036L\377\010\036L\377\010\036L\377\361\365\372\377\032\031\031\377\032\031\031\377"
    b"\032\031\031\377\032\031\031\377\377\377\377\377\012#O\377\012#O\377\361\365\372"
    b"\377\361\365\372\377\361\365\372\377\011#O\377\012#O\377\012#O\377\361\365\372"
    b"\377\361\365\372\377\032\031\031\377\032\031\031\377\377\377\377\377\014(R\377\014"
    b"(R\377\377\377\377\377\377\377\377\377\377\377\377\377\377\377\377\377\014"
    b"(R\377\014(R\377\377\377\377\377\377\377\377\377\032\031\031\377\032\031\031\377"
    b"\377\377\377\377\016,U\377\016,U\377\377\377\377\377\377\377\377\377\377\377"
    b"\377\377\377\377\377\377\016,U\377\016,U\377\377\377\377\377\377\377\377\377"
    b"\032\031\031\377\032\031\031\377\377\377\377\377\021\060X\377\021\060X\377\377\377"
    b"\377\377\377\377\377\377\377\377\377\377\021\061X\377\020\060X\377\020\060X\377"
    b"\377\377\377\377\377\377\377\377\032\031\031\377\032\031\031\377\377\377\377\377"
    b"\023\065\\\377\023\065\\\377\023\065\\\377\023\065\\\377\023\065\\\377\023\065\\\377"
    b"\023\065\\\377\377\377\377\377\377\377\377\377\377\377\377\377\032\031\031\377"
    b"\032\031\031\377\361\365\372\377\025\071_\377\025\071_\377\025\071_\377\025\071_\377"
    b"\025\071_\377\024\071_\377\361\365\372\377\361\365\372\377\361\365\372\377\361"
    b"\365\372\377\032\031\031\377\032\031\031\377\340\352\364\377\027>b\377\027>b\377"
    b"\332\346\362\377\332\346\362\377\332\346\362\377\332\346\362\377\332\346"
    b"\362\377\332\346\362\377\332\346\362\377\332\346\362\377\032\031\031\377\032"
    b"\031\031\377\322\340\357\377\031Be\377\031Be\377\305\330\353\377\305\330\353"
    b"\377\305\330\353\377\305\330\353\377\305\330\353\377\305\330\353\377\305"
    b"\330\353\377\305\330\353\377\032\031\031\377\032\031\031\377\266\316\346\377\033"
    b"Gh\377\033Gh\377\266\316\346\377\266\316\346\377\266\316\346\377\266\316\346"
    b"\377\266\316\346\377\266\316\346\377\266\316\346\377\266\316\346\377\032\031"
    b"\031\377\032\031\031\377\266\316\346\377\036Kl\377\036Kl\377\266\316\346\377\266"
    b"\316\346\377\266\316\346\377\266\316\346\377\266\316\346\377\266\316\346"
    b"\377\266\316\346\377\266\316\346\377\032\031\031\377\032\031\031\377\266\316\346"
    b"\377\266\316\346\377\266\316\346\377\266\316\346\377\266\316\346\377\266"
    b"\316\346\377\266\316\346\377\266\316\346\377\266\316\346\377\266\316\346"
    b"\377\266\316\346\377\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031\377"
    b"\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031"
    b"\377\032\031\031\377\032\031\031\377\032\031\031\377\032\031\031\377"
)


def load_badge() -> CanonicalImage:
    """Decode the badge resource into a new top-first image"""
    return CanonicalImage.from_bytes(BADGE_PIXELS, BADGE_WIDTH, BADGE_HEIGHT, ImageOrigin.TOP_FIRST)
