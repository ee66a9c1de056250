"""
Projectile Simulator Tests

Tests for arrow launch, straight-line flight, obstacle damping and
hit/miss resolution.
"""

from models import FlightOutcome, ObstacleData, Point2D, Rectangle, Vector2D
from bullseye.projectile import ProjectileSimulator

FAR_AWAY = Rectangle(x=500.0, y=300.0, width=50.0, height=50.0)


def launched(sim, x, y, vx, vy):
    return sim.fire(sim.rest(Point2D(x=x, y=y)), Point2D(x=x, y=y), Vector2D(x=vx, y=vy))


class TestLaunch:

    def test_rest_is_idle(self, slide_config):
        arrow = ProjectileSimulator(slide_config).rest(Point2D(x=300.0, y=330.0))
        assert not arrow.flying
        assert arrow.velocity == Vector2D(x=0.0, y=0.0)
        assert (arrow.width, arrow.length) == (6.0, 40.0)

    def test_fire(self, slide_config):
        sim = ProjectileSimulator(slide_config)
        arrow = launched(sim, 300.0, 330.0, 0.0, -600.0)
        assert arrow.flying
        assert arrow.velocity == Vector2D(x=0.0, y=-600.0)
        assert arrow.hit_obstacles == frozenset()

    def test_fire_while_flying_is_refused(self, slide_config):
        sim = ProjectileSimulator(slide_config)
        arrow = launched(sim, 300.0, 330.0, 0.0, -600.0)
        assert sim.fire(arrow, Point2D(x=0.0, y=0.0), Vector2D(x=0.0, y=-1.0)) is None


class TestFlight:

    def test_idle_arrow_does_not_move(self, slide_config):
        sim = ProjectileSimulator(slide_config)
        arrow = sim.rest(Point2D(x=300.0, y=330.0))
        step = sim.advance(arrow, 0.1, FAR_AWAY)
        assert step.outcome == FlightOutcome.IDLE
        assert step.arrow == arrow
        assert not step.finished

    def test_moves_by_velocity_times_dt(self, slide_config):
        sim = ProjectileSimulator(slide_config)
        step = sim.advance(launched(sim, 300.0, 330.0, 0.0, -600.0), 0.1, FAR_AWAY)
        assert step.outcome == FlightOutcome.FLYING
        assert step.arrow.tip == Point2D(x=300.0, y=270.0)

    def test_hit(self, slide_config):
        sim = ProjectileSimulator(slide_config)
        target = Rectangle(x=275.0, y=200.0, width=50.0, height=50.0)
        step = sim.advance(launched(sim, 300.0, 300.0, 0.0, -500.0), 0.1, target)
        assert step.outcome == FlightOutcome.HIT
        assert step.finished

    def test_miss_when_tip_leaves_play_area(self, slide_config):
        sim = ProjectileSimulator(slide_config)
        step = sim.advance(launched(sim, 300.0, 5.0, 0.0, -500.0), 0.1, FAR_AWAY)
        assert step.outcome == FlightOutcome.MISSED
        assert step.arrow.tip.y < 0

    def test_tip_on_edge_is_still_flying(self, slide_config):
        sim = ProjectileSimulator(slide_config)
        step = sim.advance(launched(sim, 300.0, 250.0, 0.0, -500.0), 0.5, FAR_AWAY)
        assert step.arrow.tip.y == 0.0
        assert step.outcome == FlightOutcome.FLYING

    def test_aim_flight_is_diagonal(self, aim_config):
        sim = ProjectileSimulator(aim_config)
        step = sim.advance(launched(sim, 100.0, 100.0, 1000.0, 500.0), 0.1, FAR_AWAY)
        assert step.arrow.tip == Point2D(x=200.0, y=150.0)

    def test_point_policy_needs_tip_inside(self, aim_config):
        sim = ProjectileSimulator(aim_config)
        target = Rectangle(x=1080.0, y=310.0, width=100.0, height=100.0)
        # Tip stops short of the target edge
        step = sim.advance(launched(sim, 1000.0, 350.0, 500.0, 0.0), 0.1, target)
        assert step.outcome == FlightOutcome.FLYING
        step = sim.advance(step.arrow, 0.1, target)
        assert step.outcome == FlightOutcome.HIT


class TestObstacles:

    def _obstacle(self):
        return ObstacleData(id=0, bounds=Rectangle(x=500.0, y=300.0, width=30.0, height=80.0))

    def test_first_contact_halves_velocity(self, aim_config):
        sim = ProjectileSimulator(aim_config)
        target = Rectangle(x=1080.0, y=310.0, width=100.0, height=100.0)
        arrow = launched(sim, 490.0, 320.0, 1250.0, 0.0)

        step = sim.advance(arrow, 0.02, target, [self._obstacle()])
        assert step.outcome == FlightOutcome.FLYING
        assert step.struck == [0]
        assert step.arrow.velocity == Vector2D(x=625.0, y=0.0)
        assert step.arrow.hit_obstacles == frozenset({0})
        assert step.obstacles[0].bouncing

    def test_same_obstacle_damps_only_once(self, aim_config):
        sim = ProjectileSimulator(aim_config)
        target = Rectangle(x=1080.0, y=310.0, width=100.0, height=100.0)
        arrow = launched(sim, 490.0, 320.0, 1250.0, 0.0)

        first = sim.advance(arrow, 0.02, target, [self._obstacle()])
        second = sim.advance(first.arrow, 0.02, target, first.obstacles)
        assert second.struck == []
        assert second.arrow.velocity == Vector2D(x=625.0, y=0.0)

    def test_new_shot_can_hit_obstacle_again(self, aim_config):
        sim = ProjectileSimulator(aim_config)
        target = Rectangle(x=1080.0, y=310.0, width=100.0, height=100.0)
        first = sim.advance(launched(sim, 490.0, 320.0, 1250.0, 0.0), 0.02, target, [self._obstacle()])
        again = sim.fire(sim.rest(first.arrow.tip), Point2D(x=490.0, y=320.0), Vector2D(x=1250.0, y=0.0))
        step = sim.advance(again, 0.02, target, first.obstacles)
        assert step.struck == [0]
