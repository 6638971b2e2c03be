# patternkit

Small, self-contained examples of the classic design patterns. Each pattern
lives in its own module. You can use a module on its own, or run it as a
demonstration that prints what it does.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demonstrations

The `patternkit-demo` command runs demonstrations and prints what each one
does. With no arguments it runs every demonstration that does not read input:

```
patternkit-demo
```

To run particular demonstrations, give their names:

```
patternkit-demo observer state
```

The accepted names are `prototype`, `singleton`, `factory`, `builder`,
`adapter`, `decorator`, `proxy`, `facade`, `composite`, `bridge`, `flyweight`,
`strategy`, `template`, `observer`, `iterator`, `chain`, `command`, `memento`,
`state`, `visitor`, `mediator` and `interpreter`. An unknown name is reported
as an error.

Two demonstrations read from standard input, so they run only when you name
them:

- `memento` asks for two lines of content. It then asks whether to restore the
  state saved after the first line, and restores it on `y` or `Y`.
- `interpreter` reads whitespace-separated Roman numerals until input ends and
  prints the value of each one.

```
echo "XIV MCMXCIV" | patternkit-demo interpreter
```

Every demonstration is also a function in `patternkit.demo`, for example
`demo_state()` or `demo_observer()`. `demo_memento(stdin)` and
`demo_interpreter(stdin)` take an optional text stream in place of standard
input. `demo_memento` returns the resulting `WorkObj`, and `demo_interpreter`
returns the list of values it read. `main(argv)` is the function behind the
command.

## What is included

Creational patterns:

- `patternkit.prototype`: `Prototype`, `ConcretePrototype`, with `clone()`
- `patternkit.singleton`: `Singleton` and `get_singleton()`, which always returns the same instance
- `patternkit.factory`: `Product`, `ProductA`, `ProductB`, `Factory`, `FactoryA`, `FactoryB`
- `patternkit.builder`: `ComplexProduct`, `Builder`, `BuilderA`, `BuilderB`, `Director`

Structural patterns:

- `patternkit.adapter`: `Target`, `Adaptee`, `Adapter`
- `patternkit.decorator`: `Car`, `SportsCar`, `LogoDecoratedCar`, `WingDecoratedCar`
- `patternkit.proxy`: `ClientBase`, `Client`, `Proxy`. A proxy forwards a request only when its number is 10 or more.
- `patternkit.facade`: `PreAssembler`, `Assembler`, `Tester`, `Facade`
- `patternkit.composite`: `Component`, `Composite`, `Leaf`
- `patternkit.bridge`: `Implementor`, `ConcreteImpl`, `ConcreteImplNew`, `Abstraction`, `RefinedAbstraction`
- `patternkit.flyweight`: `ExtrinsicData`, `FlyWeight`, `FlyWeightFactory`, `get_factory()`, `FlyWeightClient`

Behavioural patterns:

- `patternkit.chain`: `Demand`, `Owner`, `Manager`, `Supervisor`, `Developer`. A demand is handled by the last owner in the chain.
- `patternkit.command`: `Receiver`, `IOSEngineer`, `AndroidEngineer`, `Command`, `IOSAppCommand`, `AndroidAppCommand`, `Invoker`
- `patternkit.interpreter`: `RomanNumberInterpreter`
- `patternkit.iterator`: `Element`, `MyAggregate`, `MyIterator`
- `patternkit.mediator`: `WidgetId`, `Widget`, `ListWidget`, `EditWidget`, `FileSelectionDialog`
- `patternkit.memento`: `Memento`, `WorkObj`
- `patternkit.observer`: `Observer`, `ObserverA`, `ObserverB`, `ObserverC`, `Subject`
- `patternkit.state`: `State`, `OffState`, `OnState`, `PausedState`, `ResumedState`, `Machine`
- `patternkit.strategy`: `Algorithm`, `AlgorithmA`, `AlgorithmB`, `AlgorithmC`, `StrategyClient`
- `patternkit.template`: `CompilerTemplate`, `CppCompiler`, `JavaCompiler`
- `patternkit.visitor`: `Room`, `BedRoom`, `LivingRoom`, `Visitor`, `OwnerVisitor`, `ParentVisitor`, `FriendVisitor`

## Examples

Reading Roman numerals. The interpreter accepts upper-case numerals from 1 to
3999 and returns 0 for anything it cannot read completely:

```python
from patternkit.interpreter import RomanNumberInterpreter

interpreter = RomanNumberInterpreter()
interpreter.interpret("MCMXCIV")   # 1994
interpreter.interpret("IIII")      # 0, not a valid numeral
```

Sharing flyweights:

```python
from patternkit.flyweight import ExtrinsicData, FlyWeightClient, get_factory

client = FlyWeightClient()
client.add_flyweight(ExtrinsicData(1, 2, 3), 1, 1, 1)
client.add_flyweight(ExtrinsicData(2, 3, 4), 1, 1, 1)
len(client)                          # 2 extrinsic entries
client.get(ExtrinsicData(1, 2, 3))   # the shared FlyWeight(1, 1, 1)
len(get_factory())                   # intrinsic objects held by the shared factory
```

A `FlyWeightClient` uses the process-wide factory from `get_factory()`. You
can pass it a `FlyWeightFactory` of its own instead.

Switching machine states:

```python
from patternkit.state import Machine, OnState

machine = Machine()     # starts in OffState
machine.on()
isinstance(machine.state, OnState)   # True
machine.resume()        # not allowed from OnState; ignored
```