import pytest

from jengine.objects import Object


class Recorder(Object):
    def __init__(self, name, log):
        super().__init__(name)
        self.log = log
        self.destroyed = False

    def input(self):
        self.log.append(("input", self.name))

    def update(self, dt):
        self.log.append(("update", self.name, dt))

    def output(self):
        self.log.append(("output", self.name))

    def destroy(self):
        self.destroyed = True
        super().destroy()


class FakeRoot(Object):
    def __init__(self):
        super().__init__("root")
        self.queued = []

    def queue_delete_object(self, obj):
        self.queued.append(obj)


@pytest.fixture
def root():
    r = FakeRoot()
    Object._set_root(r)
    yield r
    Object._set_root(None)


def test_ids_are_unique():
    ids = {Object().id for _ in range(20)}
    assert len(ids) == 20


def test_add_child_sets_parent():
    parent = Object("parent")
    child = Object("child")
    parent.add_child(child)
    assert child.parent is parent
    assert parent.children == (child,)


def test_add_duplicate_child_raises():
    parent = Object()
    child = Object()
    parent.add_child(child)
    with pytest.raises(ValueError):
        parent.add_child(child)
    assert len(parent.children) == 1


def test_add_none_raises():
    with pytest.raises(TypeError):
        Object().add_child(None)


def test_get_child_and_by_name():
    parent = Object()
    a = Object("a")
    b = Object("b")
    parent.add_child(a)
    parent.add_child(b)
    assert parent.get_child(b.id) is b
    assert parent.get_child("missing") is None
    assert parent.get_child_by_name("a") is a
    assert parent.get_child_by_name("zzz") is None


def test_remove_child_clears_parent():
    parent = Object()
    child = Object()
    parent.add_child(child)
    parent.remove_child(child)
    assert child.parent is None
    assert parent.children == ()


def test_remove_non_child_raises():
    with pytest.raises(ValueError):
        Object().remove_child(Object())


def test_delete_child_destroys_subtree():
    log = []
    parent = Object()
    child = Recorder("child", log)
    grandchild = Recorder("grandchild", log)
    child.add_child(grandchild)
    parent.add_child(child)
    parent.delete_child(child)
    assert child.destroyed and grandchild.destroyed
    assert parent.children == ()
    assert child.children == ()


def test_delete_child_not_present_raises():
    with pytest.raises(ValueError):
        Object().delete_child(Object())


def test_delete_children():
    log = []
    parent = Object()
    kids = [Recorder(str(i), log) for i in range(3)]
    for kid in kids:
        parent.add_child(kid)
    parent.delete_children()
    assert parent.children == ()
    assert all(k.destroyed for k in kids)


def test_run_methods_visit_depth_first_in_order():
    log = []
    top = Object("top")
    a = Recorder("a", log)
    a1 = Recorder("a1", log)
    b = Recorder("b", log)
    a.add_child(a1)
    top.add_child(a)
    top.add_child(b)
    assert top.children == (a, b)

    top.run_input()
    assert log == [("input", n) for n in ["a", "a1", "b"]]
    log.clear()
    top.run_update(0.5)
    assert log == [("update", n, 0.5) for n in ["a", "a1", "b"]]
    log.clear()
    top.run_output()
    assert log == [("output", n) for n in ["a", "a1", "b"]]


def test_root_cannot_be_child(root):
    other = Object()
    with pytest.raises(ValueError):
        other.add_child(root)
    with pytest.raises(ValueError):
        other.remove_child(root)
    assert root.parent is None


def test_queue_delete_goes_to_root(root):
    obj = Object()
    obj.queue_delete()
    assert root.queued == [obj]


def test_queue_delete_without_root_is_ignored():
    Object._set_root(None)
    obj = Object()
    obj.queue_delete()
    assert obj.parent is None