import pytest

from patternkit.flyweight import (
    ExtrinsicData,
    FlyWeight,
    FlyWeightClient,
    FlyWeightFactory,
    get_factory,
)


@pytest.fixture
def populated():
    factory = FlyWeightFactory()
    client = FlyWeightClient(factory)
    for ex in [(1, 2, 3), (2, 3, 4), (3, 4, 5)]:
        client.add_flyweight(ExtrinsicData(*ex), 1, 1, 1)
    for ex in [(4, 5, 6), (6, 7, 8), (8, 9, 10)]:
        client.add_flyweight(ExtrinsicData(*ex), 2, 2, 2)
    return factory, client


def test_factory_shares_objects(populated):
    factory, client = populated
    assert len(factory) == 2
    assert len(client) == 6


def test_same_intrinsic_gives_same_object():
    factory = FlyWeightFactory()
    first = factory.create_flyweight(1, 1, 1)
    assert factory.create_flyweight(1, 1, 1) is first
    assert factory.create_flyweight(1, 1, 2) is not first
    assert len(factory) == 2


def test_client_entries_point_to_shared_flyweights(populated):
    _, client = populated
    assert client.get(ExtrinsicData(1, 2, 3)) is client.get(ExtrinsicData(3, 4, 5))
    assert client.get(ExtrinsicData(4, 5, 6)).intrinsic == (2, 2, 2)
    assert client.get(ExtrinsicData(9, 9, 9)) is None


def test_existing_key_is_not_overwritten():
    factory = FlyWeightFactory()
    client = FlyWeightClient(factory)
    key = ExtrinsicData(1, 2, 3)
    client.add_flyweight(key, 1, 1, 1)
    client.add_flyweight(key, 2, 2, 2)
    assert len(client) == 1
    assert client.get(key).intrinsic == (1, 1, 1)
    assert len(factory) == 2


def test_show_all_is_ordered_by_extrinsic_data(capsys):
    factory = FlyWeightFactory()
    client = FlyWeightClient(factory)
    client.add_flyweight(ExtrinsicData(8, 9, 10), 2, 2, 2)
    client.add_flyweight(ExtrinsicData(1, 2, 3), 1, 1, 1)
    client.show_all()
    assert capsys.readouterr().out == (
        "FlyWeight:\n"
        "\tIntrinsic data = 1,1,1,Extrinsic data=1,2,3\n"
        "FlyWeight:\n"
        "\tIntrinsic data = 2,2,2,Extrinsic data=8,9,10\n"
    )


def test_extrinsic_ordering_is_lexicographic():
    values = [ExtrinsicData(1, 2, 4), ExtrinsicData(1, 2, 3), ExtrinsicData(0, 9, 9)]
    assert sorted(values) == [ExtrinsicData(0, 9, 9), ExtrinsicData(1, 2, 3), ExtrinsicData(1, 2, 4)]
    assert not ExtrinsicData(1, 2, 3) < ExtrinsicData(1, 2, 3)


def test_flyweight_default_extrinsic_data():
    flyweight = FlyWeight(1, 2, 3)
    assert flyweight.ex_data == ExtrinsicData(0, 0, 0)
    flyweight.ex_data = ExtrinsicData(4, 5, 6)
    assert flyweight.ex_data == ExtrinsicData(4, 5, 6)


def test_global_factory_is_shared():
    assert get_factory() is get_factory()
    client = FlyWeightClient()
    before = len(get_factory())
    client.add_flyweight(ExtrinsicData(0, 0, 1), 101, 102, 103)
    client.add_flyweight(ExtrinsicData(0, 0, 2), 101, 102, 103)
    assert len(get_factory()) == before + 1