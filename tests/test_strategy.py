from patternkit.strategy import AlgorithmA, AlgorithmB, AlgorithmC, StrategyClient


def test_switching_algorithms():
    client = StrategyClient(AlgorithmA())
    assert client.do_calculation() == 1
    client.algorithm = AlgorithmB()
    assert client.do_calculation() == 2
    client.algorithm = AlgorithmC()
    assert client.do_calculation() == 3


def test_no_algorithm_gives_minus_one(capsys):
    client = StrategyClient(None)
    assert client.do_calculation() == -1
    assert capsys.readouterr().out == "Result is : -1\n"


def test_output(capsys):
    StrategyClient(AlgorithmB()).do_calculation()
    assert capsys.readouterr().out.splitlines() == [
        "concrete algorithmB caculation",
        "Result is : 2",
    ]