from patternkit.memento import WorkObj


def test_new_object_is_closed_and_empty():
    obj = WorkObj()
    assert obj.is_open is False
    assert obj.content == ""


def test_open_and_close():
    obj = WorkObj()
    obj.open()
    assert obj.is_open is True
    obj.close()
    assert obj.is_open is False


def test_recover_restores_captured_state():
    obj = WorkObj()
    obj.open()
    obj.content = "first"
    memento = obj.create_memento()
    obj.close()
    obj.content = "second"
    obj.recover_from_memento(memento)
    assert obj.is_open is True
    assert obj.content == "first"


def test_memento_state_reflects_capture():
    obj = WorkObj()
    obj.content = "abc"
    memento = obj.create_memento()
    assert memento.state.content == "abc"
    assert memento.state.is_open is False


def test_new_memento_overwrites_shared_state():
    obj = WorkObj()
    obj.content = "one"
    first = obj.create_memento()
    obj.content = "two"
    obj.create_memento()
    obj.content = "three"
    obj.recover_from_memento(first)
    assert obj.content == "two"


def test_save_to_memento_updates_state():
    obj = WorkObj()
    memento = obj.create_memento()
    obj.open()
    obj.content = "saved"
    obj.save_to_memento(memento)
    obj.close()
    obj.content = "other"
    obj.recover_from_memento(memento)
    assert obj.is_open is True
    assert obj.content == "saved"


def test_memento_expires_with_owner():
    obj = WorkObj()
    memento = obj.create_memento()
    del obj
    assert memento.state is None
    other = WorkObj()
    other.content = "kept"
    other.recover_from_memento(memento)
    assert other.content == "kept"