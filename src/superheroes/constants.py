WINDOW_WIDTH = 480
WINDOW_HEIGHT = 800
UPDATE_RATE = 1 / 60

# Spacing and sizes (logical pixels). Grouped into Dimens by superheroes.config.
PADDING_SMALL = 8
PADDING_MEDIUM = 16
CARD_ELEVATION = 2
CARD_IMAGE_SIZE = 72
CARD_MIN_CONTENT_HEIGHT = 72

# Typography
TOP_BAR_HEIGHT = 72
TOP_BAR_FONT_SIZE = 30
NAME_FONT_SIZE = 20
DESCRIPTION_FONT_SIZE = 14
# Approximate rendered line height as a multiple of font size.
LINE_HEIGHT_FACTOR = 1.4

# Entrance animation. Spring parameters follow the usual damping/stiffness presets:
# low-bouncy fade with medium stiffness, non-bouncy slide with very low stiffness.
DAMPING_RATIO_LOW_BOUNCY = 0.75
DAMPING_RATIO_NO_BOUNCY = 1.0
STIFFNESS_MEDIUM = 1500.0
STIFFNESS_VERY_LOW = 50.0
# Seconds between consecutive row starts; row i starts after ROW_STAGGER * (i + 1).
ROW_STAGGER = 0.05
# Remaining normalized distance under which a spring counts as settled.
SPRING_SETTLE_THRESHOLD = 0.001

# Scrolling
SCROLL_STEP = 48.0

# Colors (RGB)
BACKGROUND_COLOR = (250, 242, 247)
TOP_BAR_TEXT_COLOR = (33, 26, 31)
CARD_COLOR = (255, 216, 236)
CARD_SHADOW_COLOR = (0, 0, 0)
NAME_TEXT_COLOR = (33, 26, 31)
DESCRIPTION_TEXT_COLOR = (80, 67, 74)
IMAGE_PLACEHOLDER_COLOR = (210, 190, 200)

SHADOW_ALPHA = 60

IMAGE_DIR_NAME = "heroes"
IMAGE_EXTENSION = ".png"
DIMENS_ENV_VAR = "SUPERHEROES_DIMENS"
