"""Small vector, quaternion and wrench helpers for force/torque frame changes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

__all__ = [
    "Vec3",
    "Quat",
    "Wrench",
    "Transform",
    "quat_conj",
    "quat_mul_vec3",
    "vec3_mul_quat",
    "vec3_sub",
    "vec3_cross",
    "vec3_rotate",
    "quat_from_rpy",
    "wrench_transform",
]


@dataclass(frozen=True)
class Vec3:
    """A three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quat:
    """A quaternion with scalar part ``u`` and vector part ``x, y, z``."""

    u: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Wrench:
    """A force vector paired with a torque vector."""

    forces: Vec3 = field(default_factory=Vec3)
    torques: Vec3 = field(default_factory=Vec3)


@dataclass(frozen=True)
class Transform:
    """A rigid transform: a translation and a rotation."""

    position: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)


def quat_conj(a: Quat) -> Quat:
    """Return the conjugate of ``a``."""
    return Quat(a.u, -a.x, -a.y, -a.z)


def quat_mul_vec3(q: Quat, v: Vec3) -> Quat:
    """Multiply quaternion ``q`` by the pure quaternion ``v``."""
    return Quat(
        -q.x * v.x - q.y * v.y - q.z * v.z,
        q.u * v.x + q.y * v.z - q.z * v.y,
        q.u * v.y - q.x * v.z + q.z * v.x,
        q.u * v.z + q.x * v.y - q.y * v.x,
    )


def vec3_mul_quat(v: Quat, q: Quat) -> Vec3:
    """Multiply ``v`` by ``q`` and keep only the vector part."""
    return Vec3(
        -v.u * q.x + v.x * q.u - v.y * q.z + v.z * q.y,
        -v.u * q.y + v.x * q.z + v.y * q.u - v.z * q.x,
        -v.u * q.z - v.x * q.y + v.y * q.x + v.z * q.u,
    )


def vec3_sub(a: Vec3, b: Vec3) -> Vec3:
    """Return ``a - b``."""
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def vec3_cross(a: Vec3, b: Vec3) -> Vec3:
    """Return the cross product ``a x b``."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        -a.x * b.z + a.z * b.x,
        a.x * b.y - a.y * b.x,
    )


def vec3_rotate(q: Quat, v: Vec3) -> Vec3:
    """Rotate ``v`` by the unit quaternion ``q``."""
    return vec3_mul_quat(quat_mul_vec3(q, v), q)


def quat_from_rpy(roll: float, pitch: float, yaw: float) -> Quat:
    """Build a quaternion from roll, pitch and yaw angles in radians."""
    phi = roll / 2
    the = pitch / 2
    psi = yaw / 2
    cphi, sphi = math.cos(phi), math.sin(phi)
    cthe, sthe = math.cos(the), math.sin(the)
    cpsi, spsi = math.cos(psi), math.sin(psi)
    return Quat(
        cphi * cthe * cpsi + sphi * sthe * spsi,
        sphi * cthe * cpsi - cphi * sthe * spsi,
        cphi * sthe * cpsi + sphi * cthe * spsi,
        cphi * cthe * spsi - sphi * sthe * cpsi,
    )


def wrench_transform(w: Wrench, tf: Transform) -> Wrench:
    """Express wrench ``w`` in the frame described by ``tf``."""
    inverse = quat_conj(tf.rotation)
    forces = vec3_rotate(inverse, w.forces)
    torques = vec3_sub(
        vec3_rotate(inverse, w.torques),
        vec3_rotate(inverse, vec3_cross(tf.position, w.forces)),
    )
    return Wrench(forces, torques)