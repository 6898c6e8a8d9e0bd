"""
Configuration constants for Asteroids.

All simulation values are in pixels and seconds; UI animation timers
are in milliseconds.
"""

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
SCREEN_WIDTH: int = 800
SCREEN_HEIGHT: int = 600
UPDATE_RATE: int = 60  # Hz
MAX_FRAME_DELTA: float = 0.1  # frames slower than this are skipped
TITLE: str = "Asteroids"

# Trail effect: alpha of the black fill laid over the previous frame
TRAIL_FADE_ALPHA: int = 25

# ---------------------------------------------------------------------------
# Ship
# ---------------------------------------------------------------------------
SHIP_RADIUS: float = 10
SHIP_THRUST_POWER: float = 300   # px / s^2
SHIP_REVERSE_FACTOR: float = 0.5
SHIP_ROTATION_SPEED: float = 5   # rad / s
SHIP_MAX_SPEED: float = 400      # px / s
SHIP_DAMPING: float = 0.99       # applied once per update
SHIP_INVULNERABLE_TIME: float = 3.0

# Hull outline in ship-local space, nose along +x
SHIP_HULL: list[tuple[float, float]] = [
    (15, 0),
    (-10, -10),
    (-5, 0),
    (-10, 10),
]

# ---------------------------------------------------------------------------
# Bullets
# ---------------------------------------------------------------------------
BULLET_RADIUS: float = 2
BULLET_SPEED: float = 600
BULLET_LIFETIME: float = 1.5
SHOOT_COOLDOWN: float = 0.25

# ---------------------------------------------------------------------------
# Asteroids (keyed by size name)
# ---------------------------------------------------------------------------
ASTEROID_RADIUS: dict[str, float] = {"large": 40, "medium": 25, "small": 15}
ASTEROID_SPEED: dict[str, float] = {"large": 50, "medium": 80, "small": 120}
ASTEROID_POINTS: dict[str, int] = {"large": 20, "medium": 50, "small": 100}

ASTEROID_MIN_VERTICES: int = 8
ASTEROID_EXTRA_VERTICES: int = 4   # vertex count is 8..11
ASTEROID_VARIANCE_MIN: float = 0.8
ASTEROID_VARIANCE_SPAN: float = 0.4
ASTEROID_FRAGMENTS: int = 2

# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------
STARTING_LIVES: int = 5
INITIAL_ASTEROIDS: int = 5
MAX_WAVE_ASTEROIDS: int = 7
POINTS_PER_EXTRA_ASTEROID: int = 1000
SAFE_SPAWN_DISTANCE: float = 150

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
BACKGROUND = (0, 0, 0)
SHIP_COLOR = (0, 255, 0)
SHIP_BLINK_COLOR = (0, 128, 0)
BULLET_COLOR = (255, 255, 0)
ASTEROID_COLOR = (255, 255, 255)

UI_PRIMARY = (0, 255, 0)
UI_SECONDARY = (255, 255, 0)
UI_WARNING = (255, 0, 0)
UI_PANEL_ALPHA: int = 178  # 0.7
UI_DEBUG = (255, 0, 255)
UI_GREY = (136, 136, 136)
UI_WHITE = (255, 255, 255)

# ---------------------------------------------------------------------------
# HUD
# ---------------------------------------------------------------------------
HUD_FONT_SIZE: int = 18
HUD_SMALL_FONT_SIZE: int = 14
HUD_PADDING: int = 20
HUD_LINE_HEIGHT: int = 25
HUD_FLASH_MS: float = 500
HUD_INDICATOR_RADIUS: float = 100
HUD_INDICATOR_COUNT: int = 3
HUD_THREAT_RANGE: float = 300

# ---------------------------------------------------------------------------
# Minimap
# ---------------------------------------------------------------------------
MINIMAP_SIZE: int = 200
MINIMAP_MARGIN: int = 20
MINIMAP_DENSITY_CELL: int = 10
MINIMAP_DENSITY_SATURATION: int = 5
MINIMAP_PING_MS: float = 500

# ---------------------------------------------------------------------------
# Messages / overlays
# ---------------------------------------------------------------------------
MAX_MESSAGES: int = 3
MESSAGE_DURATION_MS: float = 3000
GAME_OVER_FADE_MS: float = 1000
FPS_SAMPLE_FRAMES: int = 30

# ---------------------------------------------------------------------------
# Achievements
# ---------------------------------------------------------------------------
ACHIEVEMENT_SCORE: int = 10_000
ACHIEVEMENT_WAVES: int = 5
ACHIEVEMENT_ASTEROIDS: int = 50
ACHIEVEMENT_ACCURACY: float = 80
ACHIEVEMENT_SURVIVAL_SECONDS: float = 300
