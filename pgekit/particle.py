"""Particle emitter: spawns, moves, ages and retires sprite particles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any

from pgekit.mathlib import cos, rand_float, sin
from pgekit.vector import Vec3

__all__ = [
    "MAX_PARTICLES",
    "Color",
    "Particle",
    "ParticleSystemInfo",
    "ParticleSystem",
]

MAX_PARTICLES = 500

_PI_2 = math.pi / 2.0
_STOPPED = -2.0
_ENDLESS = -1.0
_MIN_STEP = 0.01


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels, nominally 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def scale(self, scalar: float) -> Color:
        """Multiply every channel by a scalar."""
        return Color(self.r * scalar, self.g * scalar, self.b * scalar, self.a * scalar)


@dataclass
class Particle:
    """State of one live particle."""

    location: Vec3 = Vec3()
    velocity: Vec3 = Vec3()
    gravity: float = 0.0
    radial_accel: float = 0.0
    tangential_accel: float = 0.0
    spin: float = 0.0
    spin_delta: float = 0.0
    size: float = 0.0
    size_delta: float = 0.0
    color: Color = Color()
    color_delta: Color = Color()
    age: float = 0.0
    terminal_age: float = 0.0


@dataclass
class ParticleSystemInfo:
    """Emitter settings; ranges are sampled uniformly per particle."""

    sprite_rect: tuple[float, float, float, float] = (0.0, 0.0, 32.0, 32.0)
    sprite_texture: Any = None
    sprite_blend_mode: int = 0
    emission: int = 0
    lifetime: float = 0.0
    particle_life_min: float = 0.0
    particle_life_max: float = 0.0
    direction: float = 0.0
    spread: float = 0.0
    relative: bool = False
    speed_min: float = 0.0
    speed_max: float = 0.0
    gravity_min: float = 0.0
    gravity_max: float = 0.0
    radial_accel_min: float = 0.0
    radial_accel_max: float = 0.0
    tangential_accel_min: float = 0.0
    tangential_accel_max: float = 0.0
    size_start: float = 0.0
    size_end: float = 0.0
    size_var: float = 0.0
    spin_start: float = 0.0
    spin_end: float = 0.0
    spin_var: float = 0.0
    color_start: Color = Color()
    color_end: Color = Color()
    color_var: float = 0.0
    alpha_var: float = 0.0


def _rate(diff: float, duration: float) -> float:
    return diff / duration if duration else 0.0


def _spread(start: float, end: float, var: float) -> float:
    return rand_float(start, start + (end - start) * var)


@dataclass
class ParticleSystem:
    """A particle emitter.

    ``age`` is -2 while stopped, -1 while firing without end, and
    otherwise the time spent firing.
    """

    info: ParticleSystemInfo = field(default_factory=ParticleSystemInfo)
    age: float = _STOPPED
    emission_residue: float = 0.0
    prev_location: Vec3 = Vec3()
    location: Vec3 = Vec3()
    tx: float = 0.0
    ty: float = 0.0
    timer: float = 0.0
    particles: list[Particle] = field(default_factory=list)

    @property
    def num_particles_alive(self) -> int:
        return len(self.particles)

    def update(self, delta_time: float) -> None:
        """Advance the system; steps shorter than 0.01s are accumulated."""
        if self.age >= 0:
            self.age += delta_time
            if self.age >= self.info.lifetime:
                self.age = _STOPPED

        self.timer += delta_time
        if self.timer < _MIN_STEP:
            return
        dt = self.timer
        self.timer = 0.0

        self._advance(dt)
        if self.age != _STOPPED:
            self._emit(dt)
        self.prev_location = self.location

    def _advance(self, dt: float) -> None:
        i = 0
        while i < len(self.particles):
            par = self.particles[i]
            par.age += dt
            if par.age >= par.terminal_age:
                last = self.particles.pop()
                if i < len(self.particles):
                    self.particles[i] = last
                continue

            radial = (par.location - self.location).normalized()
            tangential = Vec3(-radial.y, radial.x, radial.z).scale(par.tangential_accel)
            radial = radial.scale(par.radial_accel)
            velocity = par.velocity + (radial + tangential).scale(dt)
            par.velocity = replace(velocity, y=velocity.y + par.gravity * dt)
            par.location = par.location + par.velocity

            par.spin += par.spin_delta * dt
            par.size += par.size_delta * dt
            par.color = par.color + par.color_delta.scale(dt)
            i += 1

    def _emit(self, dt: float) -> None:
        info = self.info
        needed = info.emission * dt + self.emission_residue
        created = int(needed)
        self.emission_residue = needed - created

        for _ in range(created):
            if len(self.particles) >= MAX_PARTICLES:
                break
            terminal = rand_float(info.particle_life_min, info.particle_life_max)

            travel = (self.location - self.prev_location).scale(rand_float(0.0, 1.0))
            start = self.prev_location + travel
            location = Vec3(
                start.x + rand_float(-2.0, 2.0),
                start.y + rand_float(-2.0, 2.0),
                start.z,
            )

            ang = info.direction - _PI_2 + rand_float(0.0, info.spread) - info.spread / 2.0
            velocity = Vec3(cos(ang), sin(ang), 0.0).scale(
                rand_float(info.speed_min, info.speed_max)
            )

            size = _spread(info.size_start, info.size_end, info.size_var)
            spin = _spread(info.spin_start, info.spin_end, info.spin_var)
            cs, ce = info.color_start, info.color_end
            color = Color(
                _spread(cs.r, ce.r, info.color_var),
                _spread(cs.g, ce.g, info.color_var),
                _spread(cs.b, ce.b, info.color_var),
                _spread(cs.a, ce.a, info.alpha_var),
            )
            color_delta = Color(
                _rate(ce.r - color.r, terminal),
                _rate(ce.g - color.g, terminal),
                _rate(ce.b - color.b, terminal),
                _rate(ce.a - color.a, terminal),
            )

            self.particles.append(
                Particle(
                    location=location,
                    velocity=velocity,
                    gravity=rand_float(info.gravity_min, info.gravity_max),
                    radial_accel=rand_float(info.radial_accel_min, info.radial_accel_max),
                    tangential_accel=rand_float(
                        info.tangential_accel_min, info.tangential_accel_max
                    ),
                    spin=spin,
                    spin_delta=_rate(info.spin_end - spin, terminal),
                    size=size,
                    size_delta=_rate(info.size_end - size, terminal),
                    color=color,
                    color_delta=color_delta,
                    age=0.0,
                    terminal_age=terminal,
                )
            )

    def stop(self, kill_particles: bool = False) -> None:
        """Stop emitting; optionally remove every live particle."""
        self.age = _STOPPED
        if kill_particles:
            self.particles.clear()

    def move_to(self, x: float, y: float, move_particles: bool = False) -> None:
        """Move the emitter, optionally dragging live particles along."""
        if move_particles:
            dx = x - self.location.x
            dy = y - self.location.y
            for par in self.particles:
                par.location = Vec3(par.location.x + dx, par.location.y + dy, par.location.z)
            self.prev_location = Vec3(
                self.prev_location.x + dx, self.prev_location.y + dy, self.prev_location.z
            )
        elif self.age == _STOPPED:
            self.prev_location = Vec3(x, y, self.prev_location.z)
        else:
            self.prev_location = Vec3(self.location.x, self.location.y, self.prev_location.z)
        self.location = Vec3(x, y, self.location.z)

    def fire(self) -> None:
        """Start emitting from the current position."""
        self.timer = 0.0
        self.age = _ENDLESS if self.info.lifetime == _ENDLESS else 0.0

    def fire_at(self, x: float, y: float) -> None:
        """Stop, jump to (x, y) and start emitting there."""
        self.stop(False)
        self.move_to(x, y, False)
        self.fire()

    def transpose(self, x: float, y: float) -> None:
        """Set the drawing offset of the whole system."""
        self.tx = x
        self.ty = y