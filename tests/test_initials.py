from bubblebobble.initials import InitialsEntry


def test_starts_with_placeholder():
    assert InitialsEntry().text() == "."


def test_forward_and_backward_from_placeholder():
    entry = InitialsEntry()
    entry.advance_character(True)
    assert entry.text() == "A"
    entry = InitialsEntry()
    entry.advance_character(False)
    assert entry.text() == "Z"


def test_wrapping_through_placeholder():
    entry = InitialsEntry()
    entry.advance_character(False)
    entry.advance_character(True)
    assert entry.text() == "."
    entry.advance_character(True)
    entry.advance_character(False)
    assert entry.text() == "."


def test_forward_then_backward_is_identity():
    entry = InitialsEntry()
    for _ in range(5):
        entry.advance_character(True)
    before = entry.text()
    entry.advance_character(True)
    entry.advance_character(False)
    assert entry.text() == before
    assert entry.text() == "E"


def test_full_cycle_returns_to_start():
    entry = InitialsEntry()
    for _ in range(27):
        entry.advance_character(True)
    assert entry.text() == "."


def test_confirm_moves_to_next_character():
    entry = InitialsEntry()
    entry.advance_character(True)
    entry.confirm_character()
    text = entry.text()
    assert len(text) == 2
    assert text[0] == "A"
    assert text[1] == "."
    entry.advance_character(False)
    assert entry.text()[0] == "A"
    assert entry.text()[1] == "Z"


def test_observer_called_once_after_all_confirmed():
    calls = []
    entry = InitialsEntry(calls.append)
    entry.confirm_character()
    entry.confirm_character()
    entry.update()
    assert calls == []
    entry.confirm_character()
    assert calls == []
    entry.update()
    assert calls == [entry]
    entry.update()
    assert calls == [entry]
    assert len(entry.text()) == 3


def test_no_changes_after_completion():
    entry = InitialsEntry()
    for _ in range(3):
        entry.advance_character(True)
        entry.confirm_character()
    before = entry.text()
    entry.advance_character(True)
    assert entry.text() == before
    assert entry.active_index == 3