import pytest

from patternkit.bridge import (
    Abstraction,
    ConcreteImpl,
    ConcreteImplNew,
    Implementor,
    RefinedAbstraction,
)


def test_operate_with_concrete_impl(capsys):
    RefinedAbstraction(ConcreteImpl()).operate()
    assert capsys.readouterr().out == "ConcreteImpl operationImplementation\n"


def test_operate_with_new_impl(capsys):
    RefinedAbstraction(ConcreteImplNew()).operate()
    assert capsys.readouterr().out == (
        "Before operate in impNew\n"
        "ConcreteImplNew operationImplementation new\n"
        "After operate in impNew\n"
    )


def test_shared_implementor(capsys):
    impl = ConcreteImpl()
    RefinedAbstraction(impl).operate()
    RefinedAbstraction(impl).operate()
    assert capsys.readouterr().out.count("ConcreteImpl operationImplementation") == 2


@pytest.mark.parametrize("cls", [Abstraction, Implementor])
def test_bases_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()