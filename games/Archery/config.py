"""
Archery - Configuration loader.

Loads display settings from .env file with sensible defaults. Gameplay
tuning lives in the YAML presets under bullseye/presets.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display (0 = use the preset's own play area)
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 0)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 0)
FPS = _get_int('FPS', 60)

# Gameplay
DEFAULT_VARIANT = os.getenv('ARCHERY_VARIANT', 'slide')
MAX_FRAME_DT = _get_float('MAX_FRAME_DT', 0.25)  # longest frame fed to the session
SHOW_BOUNDS = _get_bool('SHOW_BOUNDS', False)  # draw hit boxes for debugging

# Visual
BACKGROUND_COLOR = (24, 32, 40)
FIELD_COLOR = (40, 90, 60)
TARGET_RING_COLORS = [
    (255, 255, 255),
    (220, 40, 40),
    (255, 255, 255),
    (220, 40, 40),
]
BOW_COLOR = (160, 100, 50)
STRING_COLOR = (230, 230, 230)
ARROW_COLOR = (240, 220, 120)
OBSTACLE_COLOR = (120, 120, 140)
OBSTACLE_HIT_COLOR = (200, 200, 230)
HUD_COLOR = (255, 255, 255)
HIT_FLASH_COLOR = (255, 230, 80)
MISS_COLOR = (255, 60, 60)
BOUNDS_COLOR = (0, 255, 255)
