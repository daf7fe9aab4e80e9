"""Trapezoidal position and velocity profile generation and sampling."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["TrapMode", "TrapError", "TrapSample", "Trap"]

log = logging.getLogger(__name__)

_EPS = 1e-9


class TrapMode(IntEnum):
    """What kind of profile a trap currently holds."""

    IDLE = 0
    RATE = 1
    POS = 2


class TrapError(ValueError):
    """A profile cannot be generated from the given parameters."""


@dataclass(frozen=True)
class TrapSample:
    """Position and velocity of a profile at one instant.

    ``finished`` is true once the profile has run past its end.
    """

    position: float
    velocity: float
    finished: bool = False


def _sign(x: float) -> int:
    """Return 1 for x >= 0, -1 for x < 0 and 0 for NaN."""
    return int(x >= 0) - int(x < 0)


def _sqrt(x: float) -> float:
    """Square root that yields NaN instead of raising on negative input."""
    return math.sqrt(x) if x >= 0 else math.nan


def _div(a: float, b: float) -> float:
    """Floating-point division following IEEE rules for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _is_trapezoidal(vel_max: float, dist_total: float, dist_acc: float,
                    dist_dec: float) -> bool:
    return vel_max * (dist_total - dist_acc - dist_dec) >= 0


def _is_positive_triangle(vi: float, vm: float, vf: float) -> bool:
    return vi < vm and vm > vf


def _is_negative_triangle(vi: float, vm: float, vf: float) -> bool:
    return vi > vm and vm < vf


def _is_positive_ramp(vi: float, vm: float, vf: float) -> bool:
    return vi < vm and vm <= vf


def _is_negative_ramp(vi: float, vm: float, vf: float) -> bool:
    return vi > vm and vm >= vf


@dataclass
class Trap:
    """A trapezoidal motion profile in absolute time.

    ``generate`` plans a move to a target position, ``generate_vel`` plans a
    ramp to a target velocity; ``update`` and ``update_vel`` sample them.
    """

    pos_init: float = 0.0
    pos_pre: float = 0.0
    pos_acc: float = 0.0
    pos_dec: float = 0.0
    pos_fini: float = 0.0

    vel_max: float = 0.0
    acc: float = 0.0
    acc_pre: float = 0.0
    dec: float = 0.0

    t_init: float = 0.0
    t_pre: float = 0.0
    t_acc: float = 0.0
    t_dec: float = 0.0
    t_fini: float = 0.0

    vel_init: float = 0.0
    vel_fini: float = 0.0
    vel_pre: float = 0.0
    vel_acc: float = 0.0

    mode: TrapMode = TrapMode.IDLE

    def generate(self, t_init: float, pos_init: float, pos_fini: float,
                 vel_init: float, vel_fini: float, vel_max: float,
                 acc: float) -> None:
        """Plan a move from ``pos_init`` to ``pos_fini`` starting at ``t_init``.

        Raises TrapError if the acceleration magnitude is below 1e-9 or the
        cruise time comes out negative.
        """
        pi = pos_init
        pf = pos_fini
        d_if = pf - pi
        vi = vel_init
        vm = _sign(d_if) * abs(vel_max)
        vf = vel_fini
        acc = abs(acc)

        if acc < _EPS:
            raise TrapError(f"acc ({acc:.11f}) < {_EPS:.11f}")

        t_im = abs(vm - vi) / acc
        t_mf = abs(vf - vm) / acc
        d_im = vi * t_im + 0.5 * _sign(vm - vi) * acc * t_im * t_im
        d_mf = vm * t_mf + 0.5 * _sign(vf - vm) * acc * t_mf * t_mf

        if _is_trapezoidal(vm, d_if, d_im, d_mf):
            d_m = d_if - d_im - d_mf
            if abs(vm) < _EPS:
                vm = _sign(vm) * _EPS
            t_m = abs(_div(d_m, vm))
            if not t_m >= 0.0:
                log.error("pf %5.2f, pi %5.2f, d_acc %5.2f, d_dec %5.2f",
                          pf, pi, d_im, d_mf)
            if t_m < 0.0:
                raise TrapError(
                    f"Cruising time is negative. Failing trap. t_m: {t_m:f} s")
        else:
            if _is_positive_triangle(vi, vm, vf):
                vm = _sqrt(acc * d_if + 0.5 * (vi * vi + vf * vf))
                if not (vi < vm and vm > vf):
                    vm = -vm
                    if not (vi < vm and vm > vf):
                        vm = vf

            if _is_negative_triangle(vi, vm, vf):
                vm = _sqrt(-acc * d_if + 0.5 * (vi * vi + vf * vf))
                if not (vi > vm and vm < vf):
                    vm = -vm
                    if not (vi > vm and vm < vf):
                        vm = vf

            if _is_negative_ramp(vi, vm, vf):
                vf = _sqrt(vi * vi - 2 * acc * d_if)
                if not vi > vf:
                    vf = -vf
                vm = vf

            if _is_positive_ramp(vi, vm, vf):
                vf = _sqrt(vi * vi + 2 * acc * d_if)
                if not vi < vf:
                    vf = -vf
                vm = vf

            t_m = 0.0
            d_m = 0.0
            t_im = abs(vm - vi) / acc
            t_mf = abs(vm - vf) / acc
            d_im = vi * t_im + 0.5 * _sign(vm - vi) * acc * t_im * t_im
            d_mf = vm * t_mf + 0.5 * _sign(vf - vm) * acc * t_mf * t_mf

        self.pos_init = pi
        self.pos_pre = pi
        self.pos_acc = pi + d_im
        self.pos_dec = self.pos_acc + d_m
        self.pos_fini = pf

        self.t_init = t_init
        self.t_pre = t_init
        self.t_acc = self.t_pre + t_im
        self.t_dec = self.t_acc + t_m
        self.t_fini = self.t_dec + t_mf

        self.vel_max = vm
        self.acc_pre = acc
        self.acc = _sign(vm - vi) * acc
        self.dec = _sign(vf - vm) * acc

        self.vel_init = vi
        self.vel_fini = vf
        self.vel_pre = vi
        self.vel_acc = vm

        self.mode = TrapMode.POS

    def update(self, t: float) -> TrapSample:
        """Sample the position profile at time ``t``."""
        if t < self.t_init:
            return TrapSample(self.pos_init, self.vel_init)

        if t > self.t_fini:
            self.mode = TrapMode.IDLE
            return TrapSample(self.pos_fini, self.vel_fini, True)

        if t < self.t_pre:
            dt = t - self.t_init
            vel = self.vel_init + self.acc_pre * dt
            pos = (self.pos_init + self.vel_init * dt
                   + 0.5 * self.acc_pre * dt * dt)
        elif t < self.t_acc:
            dt = t - self.t_pre
            vel = self.vel_pre + self.acc * dt
            pos = self.pos_pre + self.vel_pre * dt + 0.5 * self.acc * dt * dt
        elif t >= self.t_dec:
            dt = t - self.t_dec
            vel = self.vel_acc + self.dec * dt
            pos = self.pos_dec + self.vel_acc * dt + 0.5 * self.dec * dt * dt
        else:
            dt = t - self.t_acc
            pos = self.pos_acc + self.vel_max * dt
            vel = self.vel_max
        return TrapSample(pos, vel)

    def generate_vel(self, t_init: float, pos_init: float, vel_init: float,
                     vel_fini: float, acc: float, max_time: float) -> None:
        """Plan a ramp to ``vel_fini``.

        With ``max_time`` above 1e-9 the velocity is held for that long and
        then brought back to zero; otherwise it is held indefinitely.
        """
        self.pos_init = pos_init
        self.t_init = t_init
        self.vel_init = vel_init
        self.vel_acc = vel_fini

        self.acc = abs(acc) if vel_fini > vel_init else -abs(acc)
        self.vel_fini = 0.0 if max_time > _EPS else vel_fini
        self.dec = abs(acc) if self.vel_fini > self.vel_acc else -abs(acc)

        self.t_acc = self.t_init + abs(
            _div(self.vel_acc - self.vel_init, self.acc))
        dt = self.t_acc - self.t_init
        self.pos_acc = pos_init + vel_init * dt + 0.5 * self.acc * dt * dt

        self.t_dec = self.t_acc + max_time
        dt = self.t_dec - self.t_acc
        self.pos_dec = self.pos_acc + self.vel_acc * dt

        self.t_fini = self.t_dec + abs(_div(self.vel_acc, self.acc))
        dt = self.t_fini - self.t_dec
        self.pos_fini = (self.pos_dec + self.vel_acc * dt
                         + 0.5 * self.dec * dt * dt)

        self.mode = TrapMode.RATE

    def update_vel(self, t: float) -> TrapSample:
        """Sample the velocity profile at time ``t``."""
        if t < self.t_acc:
            # A minimum step guarantees progress when the profile is
            # regenerated every cycle.
            dt = max(t - self.t_init, 0.001)
            vel = self.vel_init + self.acc * dt
            pos = (self.pos_init + self.vel_init * dt
                   + 0.5 * self.acc * dt * dt)
            return TrapSample(pos, vel)

        if abs(self.vel_fini) < _EPS:
            if t < self.t_dec:
                dt = t - self.t_acc
                return TrapSample(self.pos_acc + self.vel_acc * dt,
                                  self.vel_acc)
            if t < self.t_fini:
                dt = t - self.t_dec
                vel = self.vel_acc + self.dec * dt
                pos = (self.pos_dec + self.vel_acc * dt
                       + 0.5 * self.dec * dt * dt)
                return TrapSample(pos, vel)
            self.mode = TrapMode.IDLE
            return TrapSample(self.pos_fini, 0.0, True)

        dt = t - self.t_acc
        return TrapSample(self.pos_acc + self.vel_acc * dt, self.vel_fini)

    def describe(self) -> str:
        """Return a three-line summary of the profile's parameters."""
        lines = [
            f"Position: ini: {self.pos_init:f}, pre: {self.pos_pre:f}, "
            f"acc: {self.pos_acc:f}, dec: {self.pos_dec:f}, "
            f"fin: {self.pos_fini:f}",
            f"Vel/Acc:  v_ini: {self.vel_init:f}, v_pre: {self.vel_pre:f}, "
            f"v_acc: {self.vel_acc:f}, v_max: {self.vel_max:f}, "
            f"v_fin: {self.vel_fini:f}, acc: {self.acc:f}, "
            f"acc_pre: {self.acc_pre:f}, dec: {self.dec:f}",
            f"Time:     ini: {self.t_init:f}, pre: {self.t_pre:f}, "
            f"acc: {self.t_acc:f}, dec: {self.t_dec:f}, fin: {self.t_fini:f}",
        ]
        return "\n".join(lines)