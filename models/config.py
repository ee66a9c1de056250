"""
Pydantic v2 models for archery game configuration.

These models validate the YAML presets that describe one game variant:
play-area size, countdown, target motion, arrow flight, bow control,
difficulty progression, obstacles and scoring.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .enums import BowControl, CollisionPolicy, TargetMotion
from .primitives import Rectangle


class PlayAreaConfig(BaseModel):
    """Size of the play area in pixels."""
    model_config = {"frozen": True}

    width: int = Field(default=600, gt=0, description="Play-area width in pixels")
    height: int = Field(default=400, gt=0, description="Play-area height in pixels")

    def bounds(self) -> Rectangle:
        return Rectangle(x=0.0, y=0.0, width=float(self.width), height=float(self.height))


class ClockConfig(BaseModel):
    """Countdown and time-based speed ramp."""
    model_config = {"frozen": True}

    duration: int = Field(default=60, ge=1, description="Game length in seconds")
    ramp_interval: int = Field(
        default=0,
        ge=0,
        description="Raise target speed every N elapsed seconds (0 = never)"
    )
    ramp_speed_step: float = Field(
        default=0.0,
        ge=0.0,
        description="Target speed added per ramp, in pixels per second"
    )


class TargetConfig(BaseModel):
    """Target size and motion."""
    model_config = {"frozen": True}

    motion: TargetMotion = Field(default=TargetMotion.JUMP)
    size: float = Field(default=50.0, gt=0.0, description="Starting side length in pixels")
    start_x: Optional[float] = Field(
        default=None,
        description="Starting left edge; None centres the target horizontally"
    )
    right_margin: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="Pin the target this far from the right edge (overrides start_x)"
    )
    start_y: Optional[float] = Field(
        default=None,
        description="Starting top edge; None centres the target vertically"
    )
    move_interval: float = Field(
        default=1.0,
        gt=0.0,
        description="Seconds between random jumps (jump motion)"
    )
    jump_border: float = Field(
        default=10.0,
        ge=0.0,
        description="Extra right-hand clearance for jumps (border thickness)"
    )
    upper_fraction: float = Field(
        default=0.5,
        gt=0.0,
        le=1.0,
        description="Jumps keep the target's top edge within this share of the height"
    )
    speed: float = Field(default=150.0, ge=0.0, description="Bounce speed in pixels per second")
    bounce_margin: float = Field(
        default=50.0,
        ge=0.0,
        description="Distance from top/bottom at which the target turns around"
    )
    step_interval: float = Field(
        default=0.02,
        gt=0.0,
        description="Seconds between bounce steps"
    )


class ArrowConfig(BaseModel):
    """Arrow geometry and flight."""
    model_config = {"frozen": True}

    speed: float = Field(default=600.0, gt=0.0, description="Launch speed in pixels per second")
    width: float = Field(default=6.0, gt=0.0)
    length: float = Field(default=40.0, gt=0.0)
    step_interval: float = Field(
        default=1.0 / 60.0,
        gt=0.0,
        description="Seconds between flight steps"
    )
    obstacle_damping: float = Field(
        default=0.5,
        gt=0.0,
        le=1.0,
        description="Velocity factor applied on the first contact with an obstacle"
    )


class BowConfig(BaseModel):
    """Bow placement and control limits.

    SLIDE bows move in percent of the play-area width along the bottom edge;
    AIM bows move in pixels along the left edge.
    """
    model_config = {"frozen": True}

    control: BowControl = Field(default=BowControl.SLIDE)
    start: float = Field(default=50.0, description="Starting percent (slide) or top edge (aim)")
    step: float = Field(default=5.0, gt=0.0, description="Distance per move")
    min_position: float = Field(default=5.0)
    max_position: float = Field(default=95.0)
    bottom_clearance: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="For aim bows: max_position becomes height minus this value"
    )
    x: float = Field(default=50.0, description="Left edge of an aim bow")
    width: float = Field(default=60.0, gt=0.0)
    height: float = Field(default=140.0, gt=0.0)
    arrow_offset: float = Field(
        default=30.0,
        ge=0.0,
        description="Distance from the bottom edge to the resting arrow's tail (slide)"
    )

    @model_validator(mode='after')
    def validate_range(self) -> 'BowConfig':
        if self.bottom_clearance is None and self.min_position > self.max_position:
            raise ValueError("min_position must not exceed max_position")
        return self


class DifficultyConfig(BaseModel):
    """Score-driven difficulty progression.

    The level is ``score // points_per_level + 1``. Each level gained applies
    the steps below once.
    """
    model_config = {"frozen": True}

    points_per_level: int = Field(default=20, ge=1)
    speed_step: float = Field(default=0.0, ge=0.0, description="Target speed added per level (px/s)")
    interval_step: float = Field(default=0.0, ge=0.0, description="Seconds removed from the jump interval per level")
    min_interval: float = Field(default=0.2, gt=0.0)
    base_size: float = Field(default=50.0, gt=0.0)
    shrink_per_level: float = Field(default=0.0, ge=0.0)
    min_size: float = Field(default=30.0, gt=0.0)
    obstacle_start_level: int = Field(
        default=0,
        ge=0,
        description="First level with obstacles (0 = never)"
    )
    obstacle_cap: int = Field(default=6, ge=0)

    @model_validator(mode='after')
    def validate_sizes(self) -> 'DifficultyConfig':
        if self.min_size > self.base_size:
            raise ValueError("min_size must not exceed base_size")
        return self


class ObstacleConfig(BaseModel):
    """Placement area and look of obstacles."""
    model_config = {"frozen": True}

    width: float = Field(default=30.0, gt=0.0)
    height: float = Field(default=80.0, gt=0.0)
    min_x: float = Field(default=250.0, ge=0.0)
    right_margin: float = Field(default=300.0, ge=0.0)
    top_margin: float = Field(default=50.0, ge=0.0)
    bottom_margin: float = Field(default=100.0, ge=0.0)
    bounce_duration: float = Field(default=0.1, ge=0.0)


class ScoringConfig(BaseModel):
    model_config = {"frozen": True}

    points_per_hit: int = Field(default=10, ge=1)


class ArcheryConfig(BaseModel):
    """Complete description of one archery variant.

    Examples:
        >>> config = ArcheryConfig(name="test")
        >>> config.collision
        <CollisionPolicy.RECT: 'rect'>
    """
    model_config = {"frozen": True}

    name: str = Field(description="Preset name, e.g. 'slide' or 'aim'")
    description: str = Field(default="")
    collision: CollisionPolicy = Field(default=CollisionPolicy.RECT)
    play_area: PlayAreaConfig = Field(default_factory=PlayAreaConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)
    target: TargetConfig = Field(default_factory=TargetConfig)
    arrow: ArrowConfig = Field(default_factory=ArrowConfig)
    bow: BowConfig = Field(default_factory=BowConfig)
    difficulty: DifficultyConfig = Field(default_factory=DifficultyConfig)
    obstacles: ObstacleConfig = Field(default_factory=ObstacleConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    @model_validator(mode='after')
    def validate_fits_play_area(self) -> 'ArcheryConfig':
        """Make sure the target and bow fit inside the play area."""
        area = self.play_area
        if self.target.size > min(area.width, area.height):
            raise ValueError(
                f"target size {self.target.size} does not fit a "
                f"{area.width}x{area.height} play area"
            )
        if self.difficulty.base_size > min(area.width, area.height):
            raise ValueError("difficulty.base_size does not fit the play area")
        if self.bow.control == BowControl.AIM and self.bow.height > area.height:
            raise ValueError("bow height does not fit the play area")
        return self

    def bow_limits(self) -> tuple:
        """Return the (min, max) bow position for this play area."""
        low = self.bow.min_position
        if self.bow.bottom_clearance is not None:
            high = self.play_area.height - self.bow.bottom_clearance
        else:
            high = self.bow.max_position
        return low, max(low, high)
