import dataclasses

import pytest

from minigin.transform import Transform, Vec3


def test_vec3_add_then_sub_round_trips():
    a = Vec3(1.5, -2.0, 3.0)
    b = Vec3(4.0, 0.5, -1.0)
    assert (a + b) - b == a


def test_vec3_add_is_componentwise():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(10.0, 20.0, 30.0)
    total = a + b
    assert (total.x, total.y, total.z) == (a.x + b.x, a.y + b.y, a.z + b.z)


def test_vec3_sub_self_is_zero():
    a = Vec3(7.0, -3.0, 2.0)
    assert a - a == Vec3()


def test_vec3_rejects_non_vectors():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) + 5


def test_vec3_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Vec3().x = 1.0


def test_transform_starts_at_origin():
    transform = Transform()
    assert transform.local_position == Vec3()
    assert transform.world_position == Vec3()


def test_set_position_changes_only_local():
    transform = Transform()
    transform.set_position(4.0, 5.0)
    assert transform.local_position == Vec3(4.0, 5.0, 0.0)
    assert transform.world_position == Vec3()


def test_update_world_position_changes_only_world():
    transform = Transform()
    target = Vec3(9.0, 8.0, 7.0)
    transform.update_world_position(target)
    assert transform.world_position == target
    assert transform.local_position == Vec3()