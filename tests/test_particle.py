import math

import pytest

from pgekit.mathlib import srand
from pgekit.particle import (
    MAX_PARTICLES,
    Color,
    ParticleSystem,
    ParticleSystemInfo,
)
from pgekit.vector import Vec3


def make_system(**overrides):
    settings = dict(
        emission=10,
        lifetime=-1.0,
        particle_life_min=2.0,
        particle_life_max=2.0,
        speed_min=0.0,
        speed_max=0.0,
        size_start=1.0,
        size_end=3.0,
        size_var=0.5,
        color_start=Color(0.0, 0.0, 0.0, 1.0),
        color_end=Color(1.0, 1.0, 1.0, 0.0),
        color_var=0.5,
        alpha_var=0.5,
    )
    settings.update(overrides)
    srand(1234)
    return ParticleSystem(info=ParticleSystemInfo(**settings))


def test_new_system_is_stopped_and_emits_nothing():
    ps = make_system()
    assert ps.age == -2.0
    ps.update(1.0)
    assert ps.num_particles_alive == 0


def test_fire_then_update_emits_per_rate():
    ps = make_system()
    ps.fire()
    assert ps.age == -1.0
    ps.update(1.0)
    assert ps.num_particles_alive == 10
    assert all(p.age == 0.0 for p in ps.particles)


def test_small_steps_accumulate():
    ps = make_system(emission=100)
    ps.fire()
    ps.update(0.004)
    assert ps.num_particles_alive == 0
    assert ps.timer == pytest.approx(0.004)
    ps.update(0.008)
    assert ps.timer == 0.0
    assert ps.num_particles_alive == int(100 * 0.012)


def test_emission_residue_carries_over():
    ps = make_system(emission=5)
    ps.fire()
    ps.update(0.5)
    first = ps.num_particles_alive
    assert first == 2
    assert ps.emission_residue == pytest.approx(0.5)
    ps.update(0.5)
    assert ps.num_particles_alive == 5


def test_particles_capped():
    ps = make_system(emission=100000)
    ps.fire()
    ps.update(1.0)
    assert ps.num_particles_alive == MAX_PARTICLES


def test_particles_die_after_terminal_age():
    ps = make_system(particle_life_min=0.5, particle_life_max=0.5)
    ps.fire()
    ps.update(1.0)
    assert ps.num_particles_alive == 10
    ps.stop(False)
    ps.update(1.0)
    assert ps.num_particles_alive == 0


def test_finite_lifetime_stops_emission():
    ps = make_system(lifetime=1.0)
    ps.fire()
    assert ps.age == 0.0
    ps.update(0.6)
    count = ps.num_particles_alive
    assert count == 6
    ps.update(0.6)
    assert ps.age == -2.0
    assert ps.num_particles_alive == count


def test_stop_kill_clears_particles():
    ps = make_system()
    ps.fire()
    ps.update(1.0)
    ps.stop(True)
    assert ps.particles == []
    assert ps.age == -2.0


def test_size_and_color_reach_end_at_terminal_age():
    ps = make_system()
    ps.fire()
    ps.update(1.0)
    info = ps.info
    for p in ps.particles:
        assert p.terminal_age == pytest.approx(2.0)
        assert p.size + p.size_delta * p.terminal_age == pytest.approx(info.size_end)
        end = p.color + p.color_delta.scale(p.terminal_age)
        assert end.r == pytest.approx(info.color_end.r)
        assert end.a == pytest.approx(info.color_end.a)
        assert info.size_start <= p.size <= info.size_start + (info.size_end - info.size_start) * 0.5


def test_velocity_follows_direction_and_speed():
    ps = make_system(direction=math.pi / 2, spread=0.0, speed_min=3.0, speed_max=3.0)
    ps.fire()
    ps.update(1.0)
    for p in ps.particles:
        assert p.velocity.x == pytest.approx(3.0)
        assert p.velocity.y == pytest.approx(0.0, abs=1e-9)


def test_update_moves_particles_by_velocity():
    ps = make_system(direction=math.pi / 2, spread=0.0, speed_min=3.0, speed_max=3.0)
    ps.fire()
    ps.update(1.0)
    before = [p.location for p in ps.particles]
    ps.stop(False)
    ps.update(0.5)
    after = [p.location for p in ps.particles]
    assert len(after) == len(before)
    for b, a in zip(before, after):
        assert a.x - b.x == pytest.approx(3.0)
        assert a.y == pytest.approx(b.y)


def test_spawn_points_near_emitter():
    ps = make_system()
    ps.fire_at(100.0, 50.0)
    ps.update(1.0)
    for p in ps.particles:
        assert abs(p.location.x - 100.0) <= 2.0
        assert abs(p.location.y - 50.0) <= 2.0


def test_move_to_drags_particles():
    ps = make_system()
    ps.fire()
    ps.update(1.0)
    before = [p.location for p in ps.particles]
    ps.move_to(10.0, -4.0, True)
    assert ps.location == Vec3(10.0, -4.0, 0.0)
    assert ps.prev_location == Vec3(10.0, -4.0, 0.0)
    for b, p in zip(before, ps.particles):
        assert p.location.x == pytest.approx(b.x + 10.0)
        assert p.location.y == pytest.approx(b.y - 4.0)


def test_move_to_while_stopped_sets_previous():
    ps = make_system()
    ps.move_to(7.0, 8.0, False)
    assert ps.prev_location == Vec3(7.0, 8.0, 0.0)
    assert ps.location == Vec3(7.0, 8.0, 0.0)


def test_move_to_while_firing_keeps_old_as_previous():
    ps = make_system()
    ps.move_to(1.0, 2.0, False)
    ps.fire()
    ps.move_to(5.0, 6.0, False)
    assert ps.prev_location == Vec3(1.0, 2.0, 0.0)
    assert ps.location == Vec3(5.0, 6.0, 0.0)


def test_fire_at_resets_position_and_timer():
    ps = make_system(lifetime=3.0)
    ps.move_to(1.0, 1.0, False)
    ps.timer = 0.005
    ps.fire_at(20.0, 30.0)
    assert ps.location == Vec3(20.0, 30.0, 0.0)
    assert ps.prev_location == Vec3(20.0, 30.0, 0.0)
    assert ps.age == 0.0
    assert ps.timer == 0.0


def test_transpose():
    ps = make_system()
    ps.transpose(3.5, -1.5)
    assert (ps.tx, ps.ty) == (3.5, -1.5)


def test_color_arithmetic():
    c = Color(0.1, 0.2, 0.3, 0.4) + Color(0.1, 0.2, 0.3, 0.4).scale(2.0)
    assert c.r == pytest.approx(0.3)
    assert c.a == pytest.approx(1.2)


def test_info_defaults():
    info = ParticleSystemInfo()
    assert info.sprite_rect == (0.0, 0.0, 32.0, 32.0)
    assert info.emission == 0
    assert info.sprite_texture is None