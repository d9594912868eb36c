from ui.checkbox import Checkbox


def test_callback_fires_on_change_only():
    seen = []
    box = Checkbox(on_checked_change=seen.append)
    box.set_checked(True)
    box.set_checked(True)
    box.set_checked(False)
    assert seen == [True, False]
    assert box.checked is False


def test_toggle_flips_state():
    seen = []
    box = Checkbox(checked=True, on_checked_change=seen.append)
    box.toggle()
    assert box.checked is False
    box.toggle()
    assert seen == [False, True]


def test_without_callback_state_still_changes():
    box = Checkbox()
    box.set_checked(1)
    assert box.checked is True
