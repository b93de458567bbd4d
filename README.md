# skinrig

A small toolkit with no dependencies. It holds the CPU-side pieces of a 3D game engine: math,
skeletal animation, skinning, particles, scene switching, input state and WAVE parsing.

## Modules

- `skinrig.vector`: the `Float2`, `Float3` and `Float4` dataclasses. `Float3` supports
  `+`, `-`, scalar `*`, `+=` and `-=`. The module also has `length`, `normalize`, `lerp`,
  `catmull_rom_interpolation` and `catmull_rom_position`. The last one needs at least four
  control points and raises `ValueError` otherwise.
- `skinrig.quaternion`: `Quaternion`, whose default is the identity rotation.
  `make_rotate_axis_angle_quaternion` builds a rotation about an axis and `slerp` interpolates
  between two rotations.
- `skinrig.matrix`: `Matrix`, a row-major 4x4 matrix in the left-handed, row-vector
  convention. `Matrix()` is the identity, and `Matrix(*16 values)` gives the values row by row.
  Unary `-m` is the inverse, computed by Gauss-Jordan elimination without pivoting.
  - Basic helpers: `identity`, `inverse` and `transpose`.
  - Projections: `perspective_fov_lh` and `orthographic`, whose origin is the top-left corner.
  - Basic transforms: `scaling` and `translation`.
  - Rotations: `rotation_x`, `rotation_y` and `rotation_z`, with the aliases `pitch`, `yaw` and
    `roll`, plus `rotation_roll_pitch_yaw`.
  - Quaternion helpers: `quaternion_to_rotation` and `make_affine`.
  - The module also has a plain `Matrix3x3` container.
- `skinrig.transform`: `Transform` uses Euler angles and `QuaternionTransform` uses a
  quaternion. Each has `make_affine_matrix()`, which scales, then rotates, then translates.
- `skinrig.geometry`: `AABB` and `is_collision`, which counts a point on the boundary as
  inside. Also `transform_point`, which divides by the resulting w and raises `ValueError` when
  w is 0.
- `skinrig.animation`: the `KeyframeFloat3`, `KeyframeQuaternion`, `NodeAnimation` and
  `Animation` dataclasses, and `calculate_value`. That function samples a track: vectors are
  interpolated linearly and quaternions with slerp. Outside the track's time range it clamps to
  the first or last key. An empty track raises `ValueError`.
- `skinrig.skeleton`: `Node`, `Joint` and `Skeleton`. The functions are:
  - `create_joint` adds joints in depth-first order.
  - `create_skeleton` builds a skeleton from a node tree and computes its matrices.
  - `update_skeleton` recomputes the local and skeleton-space matrices.
  - `apply_animation` sets joint transforms from an `Animation` at a given time.
- `skinrig.skinning`: `VertexWeightData`, `JointWeightData`, `VertexInfluence`, `WellForGPU`
  and `SkinCluster`.
  - `create_skin_cluster(skeleton, skin_cluster_data, vertex_count)` goes through the joints in
    name order. It skips joints the skeleton lacks and keeps at most four influences per
    vertex.
  - `update_skin_cluster` refills the matrix palette, with an inverse-transpose matrix for
    normals.
- `skinrig.material`: `MaterialData` and `load_material_template_file`. That function reads a
  `.mtl` file, takes the texture path from its `map_Kd` line (the last one wins), and joins it to
  the directory.
- `skinrig.particles`: `Particle`, `InstanceData`, `ParticleGroup`, `AccelerationField`,
  `ParticleManager` and `ParticleEmitter`.
  - The manager emits randomised particles and accepts an optional `random.Random` for
    reproducible runs.
  - `update(view_matrix, projection_matrix)` drops expired particles and writes billboarded
    instance data that fades out over each particle's lifetime. It also accelerates particles
    inside the field and advances them by 1/60 s.
  - The emitter emits `count` particles, 3 by default, every 0.5 s.
- `skinrig.scene`: `BaseScene`, `AbstractSceneFactory`, `SceneFactory` and `SceneManager`.
  - `SceneFactory.register(name, scene_type)` registers the scene names.
  - `SceneManager.change_scene` requests a switch, which happens on the next `update()`.
  - `close()`, or leaving a `with` block, finalizes the current scene.
- `skinrig.wave`: `WaveFormat`, `SoundData`, `WaveFormatError`, `parse_wave(data)` and
  `load_wave(filename)`. It reads the RIFF header and the format chunk, skips chunks up to the
  data chunk, and keeps its bytes.
- `skinrig.input`: `PadType`, `GamepadState`, `MouseState`, `Joystick` and `InputState`.
  - `InputState` is fed with `update(keys, mouse_state, mouse_position)`.
  - Key queries: `push_key`, `trigger_key` and `release_key`.
  - Mouse queries: `is_press_mouse` and `is_trigger_mouse` for buttons 0–3, plus `mouse_move`
    and `wheel`.
  - Gamepads: `joystick_state` applies stick dead zones; it compares all four axes with the
    left dead zone.
- `skinrig.descriptors`: `DescriptorAllocator`, which hands out indices from 1 up to a limit
  (128 by default). When none are left it raises `DescriptorExhaustedError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: animating a skeleton

```python
from skinrig.vector import Float3
from skinrig.quaternion import Quaternion
from skinrig.transform import QuaternionTransform
from skinrig.skeleton import Node, create_skeleton, apply_animation, update_skeleton
from skinrig.animation import Animation, NodeAnimation, KeyframeFloat3, KeyframeQuaternion

root = Node(
    name="root",
    transform=QuaternionTransform(Float3(1, 1, 1), Quaternion(), Float3(0, 0, 0)),
    children=[
        Node(
            name="arm",
            transform=QuaternionTransform(Float3(1, 1, 1), Quaternion(), Float3(0, 1, 0)),
        )
    ],
)
skeleton = create_skeleton(root)

animation = Animation(duration=1.0, node_animations={
    "arm": NodeAnimation(
        translate=[KeyframeFloat3(Float3(0, 1, 0), 0.0), KeyframeFloat3(Float3(0, 2, 0), 1.0)],
        rotate=[KeyframeQuaternion(Quaternion(), 0.0)],
        scale=[KeyframeFloat3(Float3(1, 1, 1), 0.0)],
    )
})

apply_animation(skeleton, animation, 0.5)
update_skeleton(skeleton)
print(skeleton.joints[skeleton.joint_map["arm"]].skeleton_space_matrix.r[3])
```

## Example: reading a WAVE file

```python
from skinrig.wave import load_wave, WaveFormatError

try:
    sound = load_wave("jump.wav")
except WaveFormatError as exc:
    print("not a usable wave file:", exc)
else:
    print(sound.wfex.samples_per_sec, sound.buffer_size)
```

## What it does not do

skinrig only computes data. It has no window, no renderer and no GPU resources, and it does not
play audio. It does not load model or animation files either: node trees, animations and joint
weights must be built by the caller. Texture images are not loaded, so `MaterialData.texture_handle`
is left for the caller to set. `InputState` does not read devices; the caller passes in each
frame's key, mouse and gamepad readings.