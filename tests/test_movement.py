import pytest

from minigin.game_object import GameObject
from minigin.gametime import GameTime
from minigin.movement import MovementComponent, RotationComponent


def fixed_time(delta):
    values = iter([0.0, delta])
    game_time = GameTime(lambda: next(values))
    game_time.update()
    game_time.update()
    return game_time


def test_default_speeds():
    obj = GameObject()
    assert obj.add_component(MovementComponent).speed == 100.0
    assert obj.add_component(RotationComponent).rotation_speed == 0.0


def test_move_horizontal_positive():
    obj = GameObject()
    movement = obj.add_component(MovementComponent)
    movement.game_time = fixed_time(0.5)
    movement.move_horizontal(1)
    assert obj.transform.local_position == pytest.approx([50.0, 0.0, 0.0])


def test_move_vertical_is_proportional_to_speed():
    slow = GameObject()
    fast = GameObject()
    for obj, speed in ((slow, 50.0), (fast, 100.0)):
        movement = obj.add_component(MovementComponent)
        movement.speed = speed
        movement.game_time = fixed_time(0.2)
        movement.move_vertical(-1)
    assert fast.transform.local_position[1] == pytest.approx(2 * slow.transform.local_position[1])
    assert fast.transform.local_position[1] < 0


def test_zero_delta_does_not_move():
    obj = GameObject()
    obj.transform.set_local_position((3, 4, 5))
    movement = obj.add_component(MovementComponent)
    movement.game_time = fixed_time(0.0)
    movement.move_vertical(1)
    movement.move_horizontal(-1)
    assert obj.transform.local_position.tolist() == [3.0, 4.0, 5.0]


def test_rotation_accumulates():
    obj = GameObject()
    rotation = obj.add_component(RotationComponent)
    rotation.rotation_speed = -180.0
    rotation.game_time = fixed_time(0.5)
    obj.update()
    assert obj.transform.local_rotation == pytest.approx(-90.0)
    obj.update()
    assert obj.transform.local_rotation == pytest.approx(-180.0)


def test_rotation_component_moves_child():
    pivot = GameObject()
    rotation = pivot.add_component(RotationComponent)
    rotation.rotation_speed = 180.0
    rotation.game_time = fixed_time(1.0)
    child = GameObject()
    child.transform.set_local_position((60, 0, 0))
    child.set_parent(pivot, False)
    assert child.transform.world_position == pytest.approx([60.0, 0.0, 0.0])
    pivot.update()
    assert child.transform.world_position == pytest.approx([-60.0, 0.0, 0.0], abs=1e-9)