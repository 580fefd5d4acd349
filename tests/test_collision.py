import pytest

from jengine.collision import CollisionShape, CollisionShapeSquare
from jengine.entity import Entity
from jengine.physics import Physics
from jengine.vector import Vector


@pytest.fixture(autouse=True)
def fresh_physics():
    Physics.delete_instance()
    yield
    Physics.delete_instance()


def _square(x, y, w, h):
    return CollisionShapeSquare(Vector(x, y), Vector(w, h))


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        CollisionShape(Vector(0, 0))


def test_shape_registers_on_creation():
    a = _square(0, 0, 10, 10)
    b = _square(5, 5, 10, 10)
    assert Physics.get_instance().check_collision(a) == [b.id]


def test_overlapping_squares_collide_both_ways():
    a = _square(0, 0, 10, 10)
    b = _square(5, 5, 10, 10)
    assert a.collides_with(b)
    assert b.collides_with(a)


def test_separate_squares_do_not_collide():
    a = _square(0, 0, 10, 10)
    c = _square(20, 20, 10, 10)
    assert not a.collides_with(c)


def test_touching_edges_do_not_collide():
    a = _square(0, 0, 10, 10)
    b = _square(10, 0, 10, 10)
    assert not a.collides_with(b)


def test_point_inside_and_on_edge():
    a = _square(0, 0, 10, 10)
    assert a.collides_with_point(Vector(5, 5))
    assert not a.collides_with_point(Vector(0, 0))
    assert not a.collides_with_point(Vector(10, 5))


def test_layers_make_collision_one_sided():
    a = _square(0, 0, 10, 10)
    b = _square(5, 5, 10, 10)
    a.in_layer = 2
    assert not a.collides_with(b)
    assert b.collides_with(a)


def test_point_uses_global_position():
    parent = Entity(Vector(100, 100))
    child = _square(0, 0, 10, 10)
    parent.add_child(child)
    assert child.collides_with_point(Vector(105, 105))
    assert not child.collides_with_point(Vector(5, 5))


def test_update_fires_start_and_end_handlers():
    a = _square(0, 0, 10, 10)
    b = _square(5, 5, 10, 10)
    started, ended = [], []
    a.collision_start_handlers.append(started.append)
    a.collision_end_handlers.append(ended.append)

    a.update(0.0)
    assert started == [b.id]
    assert ended == []
    assert a.colliders == [b.id]

    a.update(0.0)
    assert started == [b.id]

    b.position = Vector(50, 50)
    a.update(0.0)
    assert ended == [b.id]
    assert a.colliders == []


def test_destroy_unregisters_shape():
    a = _square(0, 0, 10, 10)
    b = _square(5, 5, 10, 10)
    b.destroy()
    assert Physics.get_instance().check_collision(a) == []