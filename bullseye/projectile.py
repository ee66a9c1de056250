"""
Projectile simulator.

Moves the arrow in a straight line, damps it on the first contact with each
obstacle, and decides hit or miss. It never touches timers or the score;
the session calls ``advance`` from its flight timer and acts on the result.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from models import (
    ArcheryConfig,
    ArrowData,
    FlightOutcome,
    ObstacleData,
    Point2D,
    Rectangle,
    Vector2D,
)
from bullseye.collision import check_collision
from bullseye.logging import get_logger
from bullseye.obstacles import ObstacleField

log = get_logger('projectile')


@dataclass(frozen=True)
class FlightStep:
    """Result of advancing the arrow once.

    Attributes:
        outcome: IDLE, FLYING, HIT or MISSED
        arrow: Arrow after the move (at the impact/exit point for HIT/MISSED)
        obstacles: Obstacles after the step, with bounces started
        struck: Ids of obstacles hit for the first time on this step
    """
    outcome: FlightOutcome
    arrow: ArrowData
    obstacles: List[ObstacleData] = field(default_factory=list)
    struck: List[int] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        return self.outcome in (FlightOutcome.HIT, FlightOutcome.MISSED)


class ProjectileSimulator:
    """Straight-line arrow flight for one variant."""

    def __init__(self, config: ArcheryConfig, obstacle_field: Optional[ObstacleField] = None):
        self._config = config
        self._field = obstacle_field or ObstacleField(config)
        self._bounds = config.play_area.bounds()

    def rest(self, tip: Point2D) -> ArrowData:
        """An idle, hidden arrow resting at ``tip``."""
        cfg = self._config.arrow
        return ArrowData(
            flying=False,
            tip=tip,
            velocity=Vector2D(x=0.0, y=0.0),
            width=cfg.width,
            length=cfg.length,
        )

    def fire(self, arrow: ArrowData, tip: Point2D, velocity: Vector2D) -> Optional[ArrowData]:
        """Launch the arrow from ``tip``.

        Returns:
            The flying arrow, or None if an arrow is already in flight
        """
        if arrow.flying:
            return None
        return arrow.model_copy(update={
            'flying': True,
            'tip': tip,
            'velocity': velocity,
            'hit_obstacles': frozenset(),
        })

    def advance(
        self,
        arrow: ArrowData,
        dt: float,
        target_box: Rectangle,
        obstacles: Sequence[ObstacleData] = (),
    ) -> FlightStep:
        """Move the arrow by ``velocity * dt`` and resolve contacts.

        Order of checks: obstacles, then the target, then the play-area
        bounds. An obstacle only damps the arrow once per shot.
        """
        if not arrow.flying:
            return FlightStep(outcome=FlightOutcome.IDLE, arrow=arrow, obstacles=list(obstacles))

        policy = self._config.collision
        velocity = arrow.velocity
        tip = arrow.tip.offset(velocity.x * dt, velocity.y * dt)
        moved = arrow.model_copy(update={'tip': tip})

        hit_ids = set(arrow.hit_obstacles)
        struck: List[int] = []
        updated: List[ObstacleData] = []
        for obstacle in obstacles:
            if obstacle.id not in hit_ids and check_collision(policy, moved, obstacle.bounds):
                hit_ids.add(obstacle.id)
                struck.append(obstacle.id)
                velocity = velocity.scaled(self._config.arrow.obstacle_damping)
                obstacle = self._field.bounce(obstacle)
                log.debug("arrow struck obstacle %d, velocity now %s", obstacle.id, velocity)
            updated.append(obstacle)

        moved = moved.model_copy(update={
            'velocity': velocity,
            'hit_obstacles': frozenset(hit_ids),
        })

        if check_collision(policy, moved, target_box):
            return FlightStep(FlightOutcome.HIT, moved, updated, struck)
        if not self._bounds.contains_point(tip):
            return FlightStep(FlightOutcome.MISSED, moved, updated, struck)
        return FlightStep(FlightOutcome.FLYING, moved, updated, struck)
