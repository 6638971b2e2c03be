from patternkit.facade import Assembler, Facade, PreAssembler, Tester


def test_produce_runs_all_steps_in_order(capsys):
    assert Facade().produce() is True
    assert capsys.readouterr().out == "pre-assembling...\nassembling...\ntesting...\n"


def test_tester_reports_success(capsys):
    assert Tester().test() is True
    assert capsys.readouterr().out == "testing...\n"


def test_subsystems_individually(capsys):
    PreAssembler().operate()
    Assembler().assemble()
    assert capsys.readouterr().out == "pre-assembling...\nassembling...\n"