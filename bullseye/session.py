"""
Game session - the archery game loop.

A GameSession owns every piece of game state and every timer it starts.
Three periodic activities run while a game is on:

- the clock, once per second (``tick``)
- the target mover, on the jump interval or the bounce step
- the arrow, on the flight step, only while an arrow is in the air

Leaving PLAYING (time up or ``reset()``) cancels all three, so nothing
touches the state afterwards until the next ``start()``.

Usage:
    session = GameSession(load_config("aim"))
    session.start()
    session.aim_at(Point2D(x=900.0, y=300.0))
    session.fire()
    session.advance(dt)      # from the frame loop, dt in seconds
"""

import random
from typing import Callable, List, Optional

from models import (
    ArcheryConfig,
    ArrowData,
    BowData,
    Direction,
    FlightOutcome,
    ObstacleData,
    Point2D,
    SessionEvent,
    SessionEventType,
    TargetData,
    TargetMotion,
)
from bullseye.bow import Bow
from bullseye.clock import ClockTick, GameClock
from bullseye.difficulty import DifficultyController, LevelChange
from bullseye.games.game_state import GameState
from bullseye.logging import emit_record, get_logger
from bullseye.obstacles import ObstacleField
from bullseye.projectile import FlightStep, ProjectileSimulator
from bullseye.scheduler import Scheduler, TimerHandle
from bullseye.target import TargetMover

log = get_logger('session')

SessionListener = Callable[[SessionEvent], None]


class GameSession:
    """One player's archery game, from start to game over.

    Args:
        config: Variant configuration
        scheduler: Timer service; a private one is created if omitted
        rng: Random source for target jumps and obstacles
    """

    def __init__(
        self,
        config: ArcheryConfig,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
    ):
        self._config = config
        self._scheduler = scheduler or Scheduler()
        rng = rng or random.Random()

        self._bow_control = Bow(config)
        self._mover = TargetMover(config, rng)
        self._field = ObstacleField(config, rng)
        self._projectile = ProjectileSimulator(config, self._field)
        self._clock = GameClock(config.clock)
        self._difficulty = DifficultyController(config.difficulty)

        self._listeners: List[SessionListener] = []

        self._clock_timer: Optional[TimerHandle] = None
        self._mover_timer: Optional[TimerHandle] = None
        self._arrow_timer: Optional[TimerHandle] = None

        self._state = GameState.IDLE
        self._games_played = 0
        self._init_state()

    # =========================================================================
    # State
    # =========================================================================

    def _init_state(self) -> None:
        self._score = 0
        self._clock.reset()
        self._target: TargetData = self._mover.initial()
        self._difficulty.start(speed=self._target.speed, move_interval=self._target.move_interval)
        self._bow: BowData = self._bow_control.initial()
        self._arrow: ArrowData = self._projectile.rest(self._bow_control.arrow_rest(self._bow))
        self._obstacles: List[ObstacleData] = []

    @property
    def config(self) -> ArcheryConfig:
        return self._config

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    @property
    def score(self) -> int:
        return self._score

    @property
    def time_left(self) -> int:
        return self._clock.time_left

    @property
    def level(self) -> int:
        return self._difficulty.level

    @property
    def target(self) -> TargetData:
        return self._target

    @property
    def bow(self) -> BowData:
        return self._bow

    @property
    def arrow(self) -> ArrowData:
        return self._arrow

    @property
    def obstacles(self) -> List[ObstacleData]:
        return list(self._obstacles)

    @property
    def games_played(self) -> int:
        return self._games_played

    # =========================================================================
    # Listeners
    # =========================================================================

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener for SessionEvents.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event_type: SessionEventType, **data) -> None:
        event = SessionEvent(
            type=event_type,
            score=self._score,
            time_left=self._clock.time_left,
            level=self._difficulty.level,
            data=data,
        )
        for listener in list(self._listeners):
            listener(event)

    # =========================================================================
    # Transitions
    # =========================================================================

    def start(self) -> bool:
        """Begin a game from IDLE or GAME_OVER.

        Returns:
            False if a game is already running
        """
        if self._state == GameState.PLAYING:
            return False

        self._cancel_timers()
        self._init_state()
        self._state = GameState.PLAYING

        self._clock_timer = self._scheduler.every(1.0, self._on_clock, name='clock')
        self._start_target_movement()

        log.info("game started (%s, %ds)", self._config.name, self._clock.duration)
        self._emit(SessionEventType.STARTED)
        return True

    def reset(self) -> None:
        """Abort any game and return to IDLE with fresh state."""
        cancelled = self._cancel_timers()
        self._init_state()
        self._state = GameState.IDLE
        log.info("session reset (%d timers cancelled)", cancelled)
        self._emit(SessionEventType.RESET)

    def _end_game(self) -> None:
        self._cancel_timers()
        self._state = GameState.GAME_OVER
        self._reset_arrow()
        self._games_played += 1

        log.info("game over: score=%d level=%d", self._score, self._difficulty.level)
        emit_record('session', {
            'type': 'game_over',
            'preset': self._config.name,
            'score': self._score,
            'level': self._difficulty.level,
            'duration': self._clock.duration,
        })
        self._emit(SessionEventType.GAME_OVER,
                   final_score=self._score,
                   final_level=self._difficulty.level)

    def _cancel_timers(self) -> int:
        cancelled = 0
        for handle in (self._clock_timer, self._mover_timer, self._arrow_timer):
            if handle is not None and handle.active:
                self._scheduler.cancel(handle)
                cancelled += 1
        self._clock_timer = None
        self._mover_timer = None
        self._arrow_timer = None
        return cancelled

    # =========================================================================
    # Clock
    # =========================================================================

    def _on_clock(self) -> None:
        self.tick()

    def tick(self) -> Optional[ClockTick]:
        """Count down one second. No-op unless PLAYING."""
        if self._state != GameState.PLAYING:
            return None

        result = self._clock.tick()
        if result.ramp:
            speed = self._difficulty.ramp_speed(self._config.clock.ramp_speed_step)
            self._target = self._target.model_copy(update={'speed': speed})
            log.debug("speed ramp: target speed %.1f", speed)

        self._emit(SessionEventType.TICK)

        if result.expired:
            self._end_game()
        return result

    # =========================================================================
    # Target
    # =========================================================================

    def _start_target_movement(self) -> None:
        """(Re)start the mover timer at the current target settings."""
        self._scheduler.cancel(self._mover_timer)
        if self._mover.motion == TargetMotion.JUMP:
            self._target = self._mover.jump(self._target)
            interval = self._target.move_interval
        else:
            interval = self._config.target.step_interval
        self._mover_timer = self._scheduler.every(interval, self._move_target, name='target')

    def _move_target(self) -> None:
        if self._state != GameState.PLAYING:
            return
        if self._mover.motion == TargetMotion.JUMP:
            self._target = self._mover.jump(self._target)
        else:
            self._target = self._mover.step(self._target, self._config.target.step_interval)

    # =========================================================================
    # Bow
    # =========================================================================

    def move_bow(self, direction: Direction) -> bool:
        """Step the bow. The resting arrow follows it. No-op unless PLAYING."""
        if self._state != GameState.PLAYING:
            return False
        self._bow = self._bow_control.move(self._bow, Direction(direction))
        if not self._arrow.flying:
            self._arrow = self._projectile.rest(self._bow_control.arrow_rest(self._bow))
        return True

    def aim_at(self, point: Point2D) -> bool:
        """Turn the bow towards a screen point. No-op unless PLAYING."""
        if self._state != GameState.PLAYING:
            return False
        self._bow = self._bow_control.aim_at(self._bow, point)
        return True

    # =========================================================================
    # Arrow
    # =========================================================================

    def fire(self) -> bool:
        """Shoot an arrow from the bow.

        Returns:
            False (and changes nothing) when no game is running or an arrow
            is already in flight
        """
        if self._state != GameState.PLAYING or self._arrow.flying:
            return False

        tip = self._bow_control.arrow_rest(self._bow)
        velocity = self._bow_control.launch_velocity(self._bow)
        arrow = self._projectile.fire(self._arrow, tip, velocity)
        if arrow is None:
            return False
        self._arrow = arrow
        self._arrow_timer = self._scheduler.every(
            self._config.arrow.step_interval, self._on_arrow_step, name='arrow')

        log.debug("fired from %s with velocity %s", tip, velocity)
        self._emit(SessionEventType.FIRED, x=tip.x, y=tip.y)
        return True

    def _on_arrow_step(self) -> None:
        self.advance_arrow(self._config.arrow.step_interval)

    def advance_arrow(self, dt: float) -> FlightStep:
        """Move the arrow by one step of ``dt`` seconds and resolve contacts."""
        if self._state != GameState.PLAYING:
            return FlightStep(outcome=FlightOutcome.IDLE, arrow=self._arrow, obstacles=self.obstacles)

        step = self._projectile.advance(self._arrow, dt, self._target.get_bounds(), self._obstacles)
        self._obstacles = step.obstacles
        for obstacle_id in step.struck:
            self._emit(SessionEventType.OBSTACLE_HIT, obstacle_id=obstacle_id)

        if step.outcome == FlightOutcome.HIT:
            self._handle_hit(step.arrow.tip)
        elif step.outcome == FlightOutcome.MISSED:
            self._reset_arrow()
            log.debug("arrow left the field at %s", step.arrow.tip)
            self._emit(SessionEventType.MISSED, x=step.arrow.tip.x, y=step.arrow.tip.y)
        elif step.outcome == FlightOutcome.FLYING:
            self._arrow = step.arrow
        return step

    def _reset_arrow(self) -> None:
        self._scheduler.cancel(self._arrow_timer)
        self._arrow_timer = None
        self._arrow = self._projectile.rest(self._bow_control.arrow_rest(self._bow))

    def _handle_hit(self, position: Point2D) -> None:
        self._score += self._config.scoring.points_per_hit
        self._reset_arrow()
        log.info("hit! score=%d", self._score)
        self._emit(SessionEventType.SCORE, x=position.x, y=position.y,
                   points=self._config.scoring.points_per_hit)

        for change in self._difficulty.update(self._score):
            self._apply_level(change)

    def _apply_level(self, change: LevelChange) -> None:
        interval_changed = change.move_interval != self._target.move_interval
        self._target = self._mover.resize(self._target, change.size).model_copy(update={
            'speed': change.speed,
            'move_interval': change.move_interval,
        })

        if self._mover.motion == TargetMotion.JUMP and interval_changed:
            self._start_target_movement()

        if change.obstacle_count > 0:
            self._obstacles = self._field.spawn(change.obstacle_count)
            self._emit(SessionEventType.OBSTACLES, count=change.obstacle_count)

        self._emit(SessionEventType.LEVEL_UP, size=change.size, speed=change.speed)

    # =========================================================================
    # Frame loop
    # =========================================================================

    def advance(self, dt: float) -> int:
        """Let ``dt`` seconds of game time pass.

        Runs every timer that falls due and winds down obstacle bounce
        animations. Returns the number of timer callbacks executed.
        """
        executed = self._scheduler.advance(dt)
        if any(o.bouncing for o in self._obstacles):
            self._obstacles = ObstacleField.settle(self._obstacles, dt)
        return executed

    def __repr__(self) -> str:
        return (f"GameSession({self._config.name!r}, state={self._state.value}, "
                f"score={self._score}, time_left={self._clock.time_left}, level={self.level})")
