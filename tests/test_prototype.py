import pytest

from patternkit.prototype import ConcretePrototype, Prototype


def test_clone_keeps_data():
    original = ConcretePrototype(2)
    copy = original.clone()
    assert copy.data == 2
    assert copy == original


def test_clone_is_a_distinct_object():
    original = ConcretePrototype(2)
    copy = original.clone()
    assert copy is not original
    copy.data = 7
    assert original.data == 2


def test_prototype_is_abstract():
    with pytest.raises(TypeError):
        Prototype()