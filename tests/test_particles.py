import pytest

from fireworks.core.particles import EXPLOSION_FADE_RATE, ExplosionParticle, Particle
from fireworks.core.physics import Vec2
from fireworks.core.surface import RecordingSurface
from fireworks.core.trail import TrailBuffer


def _spark(**kwargs) -> ExplosionParticle:
    return ExplosionParticle(120.0, Vec2(100.0, 100.0), Vec2(2.0, -3.0), 3.0, **kwargs)


def test_trail_buffer_evicts_oldest_first():
    trail = TrailBuffer(3, start=Vec2(0, 0))
    for i in range(1, 6):
        trail.push(Vec2(i, i))

    assert len(trail) == 3
    assert trail.to_list() == [Vec2(3, 3), Vec2(4, 4), Vec2(5, 5)]
    assert trail[0] == Vec2(3, 3)


def test_trail_segments_skip_newest_point():
    trail = TrailBuffer(4, start=Vec2(0, 0))
    trail.push(Vec2(1, 0))
    trail.push(Vec2(2, 0))

    segments = list(trail.segments())

    assert [s[2] for s in segments] == [Vec2(0, 0), Vec2(1, 0)]
    assert [s[1] for s in segments] == pytest.approx([1 / 3, 2 / 3])


def test_trail_rejects_zero_length():
    with pytest.raises(ValueError):
        TrailBuffer(0)


def test_explosion_particle_starts_fresh():
    spark = _spark()

    assert spark.lifespan == 1.0
    assert not spark.is_dead
    assert spark.fade_rate == pytest.approx(1 / 120)
    assert spark.max_trail_length == 15
    assert spark.trail.to_list() == [Vec2(100.0, 100.0)]


def test_explosion_particle_lifespan_drops_each_tick():
    spark = _spark()
    previous = spark.lifespan

    for _ in range(119):
        spark.update()
        assert spark.lifespan == pytest.approx(previous - EXPLOSION_FADE_RATE)
        assert spark.lifespan < previous
        previous = spark.lifespan


def test_explosion_particle_dies_at_tick_120():
    spark = _spark()

    for _ in range(119):
        spark.update()
    assert not spark.is_dead

    spark.update()
    assert spark.lifespan == 0
    assert spark.is_dead

    for _ in range(30):
        spark.update()
        assert spark.lifespan == 0
        assert spark.is_dead


def test_explosion_particle_trail_stays_bounded():
    spark = _spark()

    for _ in range(40):
        spark.update()
        assert len(spark.trail) <= 15

    assert len(spark.trail) == 15
    assert spark.trail[-1] == spark.position


def test_explosion_particle_draws_trail_then_head():
    spark = _spark()
    for _ in range(3):
        spark.update()

    surface = RecordingSurface()
    spark.draw(surface)

    # 4 trail points, newest is under the head
    assert len(surface.commands) == 4
    head = surface.commands[-1]
    assert head.center == spark.position.to_tuple()
    assert head.radius == pytest.approx(3.0 * 1.3)
    assert head.alpha == pytest.approx(spark.lifespan)

    oldest = surface.commands[0]
    assert oldest.alpha == pytest.approx(0.25 * spark.lifespan * 0.9)
    assert oldest.radius == pytest.approx(3.0 * 0.25 * 1.2)


def test_explosion_particle_trail_radius_floor():
    spark = ExplosionParticle(0.0, Vec2(0, 0), Vec2(1, 0), 0.5)
    for _ in range(14):
        spark.update()

    surface = RecordingSurface()
    spark.draw_trail(surface)

    assert surface.commands
    assert min(c.radius for c in surface.commands) == pytest.approx(0.8)


def test_dead_explosion_particle_draws_nothing():
    spark = _spark()
    for _ in range(120):
        spark.update()

    surface = RecordingSurface()
    spark.draw(surface)

    assert surface.commands == []


def test_plain_particle_draw_contract():
    particle = Particle(0.0, Vec2(5, 5), Vec2(0, 0), 2.0)
    surface = RecordingSurface()

    particle.draw(surface)

    assert len(surface.commands) == 1
    command = surface.commands[0]
    assert command.radius == 2.0
    assert command.color == (255, 0, 0)
    assert command.alpha == 1.0

    particle.update()
    assert particle.velocity == Vec2(0, 0.2)


def test_faint_trail_segments_are_skipped():
    spark = _spark()
    for _ in range(110):
        spark.update()
    surface = RecordingSurface()

    spark.draw_trail(surface)

    count = len(spark.trail)
    expected = [
        (i + 1) / count * spark.lifespan * 0.9
        for i in range(count - 1)
        if (i + 1) / count * spark.lifespan * 0.9 > 0.01
    ]
    assert count == 15
    assert 0 < len(expected) < count - 1
    assert [c.alpha for c in surface.commands] == pytest.approx(expected)
