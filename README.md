# motionkit

Small building blocks for motion control software:

- **`motionkit.trap`**: trapezoidal position and velocity profiles that you
  sample over time.
- **`motionkit.transforms`**: 3-vectors, quaternions, and moving a
  force/torque wrench into another frame.
- **`motionkit.yaml_parser`**: reads YAML configuration with required,
  optional and range-checked fields. A field that is missing or cannot be
  converted raises `YamlParseError`.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Trapezoidal profiles

```python
from motionkit.trap import Trap, TrapMode

trap = Trap()
# Start at t=0 at position 0 and stop at position 10.
# Start and end at rest, cruise at 2 units/s and accelerate at 1 unit/s^2.
trap.generate(0.0, 0.0, 10.0, 0.0, 0.0, 2.0, 1.0)

sample = trap.update(3.0)
print(sample.position, sample.velocity, sample.finished)
```

`Trap.generate(t_init, pos_init, pos_fini, vel_init, vel_fini, vel_max, acc)`
plans a move and sets `trap.mode` to `TrapMode.POS`. It raises `TrapError`
when the acceleration magnitude is below 1e-9, or when the computed cruise
time comes out negative. When the distance is too short to reach the cruise
speed, the profile becomes a triangle or a ramp, and the final velocity may
be adjusted so that the move does not overshoot.

`Trap.update(t)` returns a `TrapSample` with `position`, `velocity` and
`finished`. Before `t_init` the sample holds the start values. After the end
of the profile it holds the final values, `finished` is `True`, and the trap's
mode goes back to `TrapMode.IDLE`.

For velocity profiles, use `generate_vel` and `update_vel`:

```python
# Go from 0 to 1 unit/s. Hold that speed for 10 s, then slow down to a stop.
trap.generate_vel(0.0, 0.0, 0.0, 1.0, 1.0, 10.0)
sample = trap.update_vel(5.0)
```

`generate_vel` sets the mode to `TrapMode.RATE`. If `max_time` is not above
1e-9, the profile holds the target velocity indefinitely.

During the ramp, `update_vel` uses a time step of at least 0.001 s. A profile
that is regenerated every cycle therefore still makes progress.

`trap.describe()` returns a three-line summary of the profile's positions,
velocities, accelerations and times.

## Transforms

```python
import math
from motionkit.transforms import Vec3, Wrench, Transform, quat_from_rpy, wrench_transform

tf = Transform(position=Vec3(0, 1, 0), rotation=quat_from_rpy(0, math.pi / 2, 0))
w = Wrench(forces=Vec3(0, 0, -1), torques=Vec3(1, 0, 0))
print(wrench_transform(w, tf))
```

`Vec3`, `Quat`, `Wrench` and `Transform` are frozen dataclasses. The default
`Quat` is the identity rotation (`u=1`).

The module also provides lower-level helpers:

- `quat_conj`
- `quat_mul_vec3`
- `vec3_mul_quat`
- `vec3_sub`
- `vec3_cross`
- `vec3_rotate`

## YAML configuration

```python
from motionkit.yaml_parser import ValueKind, YamlParseError, load_file, parse_node, parse_val, parse_list, parse_opt_val

config = load_file("topology.yaml")
settings = parse_node(config, "settings")
rate = parse_val(settings, "target_loop_rate_hz", ValueKind.DOUBLE)
buses = parse_list(config, "buses")
```

- `load_file` reads a document with `yaml.safe_load`.
- `parse_node` returns a sub-node.
- `parse_list` returns a sub-node that must be a sequence.
- `parse_val` converts a field to a `ValueKind`:
  - `DOUBLE`, `FLOAT`, `STRING` and `BOOL`.
  - Signed and unsigned integers of 8, 16, 32 and 64 bits. Integer values
    outside the range of their kind are rejected.
  - `FLOAT` values are rounded to single precision.
- `parse_val_check_range` also raises `YamlParseError` when the value lies
  outside `[lower, upper]`.
- `parse_opt_val` and `parse_opt_val_check_range` return `None` when the field
  is absent.

The range-checking functions raise `TypeError` for `STRING` or `BOOL` kinds.
`YamlParseError` is a `ValueError` that records the offending `field`.

## What this package does not do

motionkit only computes and parses. It does not:

- talk to any hardware or bus,
- run a control loop,
- manage devices or queue commands,
- save actuator positions to disk.

Those are left to the application that uses these pieces.