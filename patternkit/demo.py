"""Walk-throughs that exercise every pattern and print what happens."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO

from patternkit.adapter import Adaptee, Adapter
from patternkit.bridge import ConcreteImpl, ConcreteImplNew, RefinedAbstraction
from patternkit.builder import BuilderA, BuilderB, Director
from patternkit.chain import Demand, Developer, Manager, Supervisor
from patternkit.command import (
    AndroidAppCommand,
    AndroidEngineer,
    IOSAppCommand,
    IOSEngineer,
    Invoker,
)
from patternkit.composite import Composite, Leaf
from patternkit.decorator import LogoDecoratedCar, SportsCar, WingDecoratedCar
from patternkit.facade import Facade
from patternkit.factory import FactoryA, FactoryB
from patternkit.flyweight import ExtrinsicData, FlyWeightClient, get_factory
from patternkit.interpreter import RomanNumberInterpreter
from patternkit.iterator import MyAggregate
from patternkit.mediator import FileSelectionDialog, WidgetId
from patternkit.memento import WorkObj
from patternkit.observer import ObserverA, ObserverB, ObserverC, Subject
from patternkit.prototype import ConcretePrototype
from patternkit.proxy import Client, Proxy
from patternkit.singleton import get_singleton
from patternkit.state import Machine
from patternkit.strategy import AlgorithmA, AlgorithmB, AlgorithmC, StrategyClient
from patternkit.template import CppCompiler, JavaCompiler
from patternkit.visitor import BedRoom, FriendVisitor, LivingRoom, OwnerVisitor, ParentVisitor


def demo_prototype() -> None:
    original = ConcretePrototype(2)
    copy = original.clone()
    print(f"obj1={original.data}")
    print(f"obj2={copy.data}")


def demo_singleton() -> None:
    get_singleton().data = 12
    print(f"Singleton={get_singleton().data}")
    print(f"Singleton={get_singleton().data}")
    get_singleton().data = 24
    print(f"Singleton={get_singleton().data}")
    print(f"Singleton={get_singleton().data}")


def demo_factory_method() -> None:
    first = FactoryA().create_product()
    second = FactoryB().create_product()
    first.play()
    second.play()


def demo_builder() -> None:
    director_a = Director(BuilderA())
    director_b = Director(BuilderB())
    director_a.construct()
    director_b.construct()
    director_a.product.show()
    director_b.product.show()


def demo_adapter() -> None:
    Adapter(Adaptee()).request()


def demo_decorator() -> None:
    sports_car = SportsCar("Ferrari")
    sports_car.show()
    logo_car = LogoDecoratedCar(sports_car)
    logo_car.show()
    wing_car = WingDecoratedCar(logo_car)
    wing_car.show()


def demo_proxy() -> None:
    client = Client()
    print("proxy1:")
    Proxy(client, 1).request()
    print("proxy2:")
    Proxy(client, 11).request()


def demo_facade() -> None:
    Facade().produce()


def demo_composite() -> None:
    composite = Composite()
    composite.add(Leaf("Leaf1"))
    composite.add(Leaf("Leaf2"))
    composite.show_name()

    first = composite.get_component(0)
    if first is not None:
        composite.remove(first)
    composite.show_name()


def demo_bridge() -> None:
    first = RefinedAbstraction(ConcreteImpl())
    second = RefinedAbstraction(ConcreteImplNew())
    first.operate()
    print()
    second.operate()


def demo_flyweight() -> None:
    client = FlyWeightClient()
    for extrinsic, intrinsic in (
        ((1, 2, 3), 1),
        ((2, 3, 4), 1),
        ((3, 4, 5), 1),
        ((4, 5, 6), 2),
        ((6, 7, 8), 2),
        ((8, 9, 10), 2),
    ):
        client.add_flyweight(ExtrinsicData(*extrinsic), intrinsic, intrinsic, intrinsic)

    print(f"Objects in factory: {len(get_factory())}")
    print(f"Extrinsic data in client: {len(client)}")
    client.show_all()


def demo_strategy() -> None:
    client = StrategyClient(AlgorithmA())
    client.do_calculation()
    client.algorithm = AlgorithmB()
    client.do_calculation()
    client.algorithm = AlgorithmC()
    client.do_calculation()


def demo_template() -> None:
    print("Begin to complie C++:")
    CppCompiler().compile()
    print()
    print("Begin to complie Java:")
    JavaCompiler().compile()


def demo_observer() -> None:
    subject = Subject()
    observer_a = ObserverA()
    for observer in (observer_a, ObserverB(), ObserverC()):
        subject.register_observer(observer)

    subject.data = 1
    subject.set_changed(True)
    subject.notify_all()
    print()
    subject.notify_data_all()

    print()
    print()
    subject.remove_observer(observer_a)
    subject.data = 9
    subject.set_changed(True)
    subject.notify_all()
    print()
    subject.notify_data_all()


def demo_iterator() -> None:
    cursor = MyAggregate().create_iterator()
    cursor.current_item().echo()
    while cursor.has_next():
        cursor.next()
        cursor.current_item().echo()


def demo_chain() -> None:
    demand = Demand("Urgent", "Build a shoping site better than Taobao")
    developer = Developer()
    supervisor = Supervisor(developer)
    manager = Manager(supervisor)
    manager.handle_demand(demand)


def demo_command() -> None:
    boss = Invoker()
    boss.add_command(IOSAppCommand(IOSEngineer()))
    boss.add_command(AndroidAppCommand(AndroidEngineer()))
    boss.process("iOS")
    boss.process("Android")
    boss.process("ffff")


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    return line[:-1] if line.endswith("\n") else line


def _read_char(stream: TextIO) -> str:
    """Return the next non-whitespace character, or '' at end of input."""
    for line in iter(stream.readline, ""):
        stripped = line.lstrip()
        if stripped:
            return stripped[0]
    return ""


def _show_work(work: WorkObj) -> None:
    print(f"Open state is:{int(work.is_open)}")
    print(f"Your input is:  {work.content}")


def demo_memento(stdin: TextIO | None = None) -> WorkObj:
    """Take two inputs, then optionally restore the first; return the object."""
    stream = sys.stdin if stdin is None else stdin
    work = WorkObj()

    work.open()
    print("Please enter your content...")
    work.content = _read_line(stream)
    print()
    print("Current content is:")
    _show_work(work)

    print("Creating a memento")
    memento = work.create_memento()

    work.close()
    print("Please input your content...")
    work.content = _read_line(stream)
    print()
    print("Current content is:")
    _show_work(work)

    print("Recover from Memento? [y/n]")
    if _read_char(stream) in ("y", "Y"):
        print("Recover from last Memento...")
        work.recover_from_memento(memento)
    else:
        print("Current content is:")
    _show_work(work)
    return work


def demo_state() -> None:
    machine = Machine()
    machine.on()
    machine.pause()
    machine.resume()
    machine.off()


def demo_visitor() -> None:
    visitors = (OwnerVisitor(), ParentVisitor(), FriendVisitor())
    for room in (BedRoom(), LivingRoom()):
        for visitor in visitors:
            room.accept(visitor)


def demo_mediator() -> None:
    dialog = FileSelectionDialog()
    for which in WidgetId:
        dialog.handle_event(which)
        print()
    print()
    for which in WidgetId:
        dialog.get_widget(which).changed()
        print()


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def demo_interpreter(stdin: TextIO | None = None) -> list[int]:
    """Interpret each whitespace-separated numeral read; return the values."""
    stream = sys.stdin if stdin is None else stdin
    interpreter = RomanNumberInterpreter()
    values: list[int] = []
    print("Enter Roman Numeral: ", end="")
    for token in _tokens(stream):
        value = interpreter.interpret(token)
        values.append(value)
        print(f"\t\t\tinterpretion is  {value}")
        print()
        print("Enter Roman Numeral: ", end="")
    return values


_DEMOS: dict[str, Callable[[], object]] = {
    "prototype": demo_prototype,
    "singleton": demo_singleton,
    "factory": demo_factory_method,
    "builder": demo_builder,
    "adapter": demo_adapter,
    "decorator": demo_decorator,
    "proxy": demo_proxy,
    "facade": demo_facade,
    "composite": demo_composite,
    "bridge": demo_bridge,
    "flyweight": demo_flyweight,
    "strategy": demo_strategy,
    "template": demo_template,
    "observer": demo_observer,
    "iterator": demo_iterator,
    "chain": demo_chain,
    "command": demo_command,
    "memento": demo_memento,
    "state": demo_state,
    "visitor": demo_visitor,
    "mediator": demo_mediator,
    "interpreter": demo_interpreter,
}

_INTERACTIVE = frozenset({"memento", "interpreter"})


def main(argv: Sequence[str] | None = None) -> int:
    """Run the named demos, or every non-interactive one when none is named."""
    parser = argparse.ArgumentParser(
        prog="patternkit", description="Run design pattern demonstrations."
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help="one of: " + ", ".join(_DEMOS),
    )
    args = parser.parse_args(argv)

    unknown = [name for name in args.patterns if name not in _DEMOS]
    if unknown:
        parser.error(f"unknown pattern: {', '.join(unknown)}")

    names = args.patterns or [name for name in _DEMOS if name not in _INTERACTIVE]
    for name in names:
        _DEMOS[name]()
    return 0