import pytest

from bubblebobble.buttons import Button, ButtonHandler


def make_buttons(count, log):
    return [Button(lambda i=i: log.append(i)) for i in range(count)]


def test_button_runs_command_only_when_selected():
    log = []
    button = Button(lambda: log.append("ran"))
    button.activate()
    assert log == []
    button.select(True)
    button.activate()
    assert log == ["ran"]


def test_first_added_button_is_selected():
    handler = ButtonHandler()
    first, second = make_buttons(2, [])
    handler.add_button(first)
    handler.add_button(second)
    assert handler.selected_button() is first
    assert first.selected and not second.selected


def test_adding_same_button_twice_raises():
    handler = ButtonHandler()
    button = Button(lambda: None)
    handler.add_button(button)
    with pytest.raises(ValueError):
        handler.add_button(button)
    assert handler.buttons == (button,)


def test_select_next_wraps():
    handler = ButtonHandler()
    buttons = make_buttons(3, [])
    for button in buttons:
        handler.add_button(button)
    handler.select_next()
    handler.select_next()
    assert handler.selected_button() is buttons[2]
    handler.select_next()
    assert handler.selected_button() is buttons[0]
    assert [b.selected for b in buttons] == [True, False, False]


def test_select_previous_wraps():
    handler = ButtonHandler()
    buttons = make_buttons(3, [])
    for button in buttons:
        handler.add_button(button)
    handler.select_previous()
    assert handler.selected_button() is buttons[2]
    assert sum(b.selected for b in buttons) == 1


def test_activation_happens_on_update():
    log = []
    handler = ButtonHandler()
    for button in make_buttons(2, log):
        handler.add_button(button)
    handler.select_next()
    handler.activate()
    assert log == []
    handler.update()
    assert log == [1]
    handler.update()
    assert log == [1]


def test_empty_handler_errors():
    handler = ButtonHandler()
    with pytest.raises(IndexError):
        handler.selected_button()
    with pytest.raises(IndexError):
        handler.select_next()
    handler.activate()
    with pytest.raises(IndexError):
        handler.update()