"""Menu buttons and the handler that moves the selection between them."""

from __future__ import annotations

from typing import Callable, Optional

Command = Callable[[], object]


class Button:
    """A menu button that runs its command when activated while selected."""

    def __init__(self, command: Command, position: tuple[float, float] = (0.0, 0.0)) -> None:
        self.command = command
        self.position = position
        self.selected = False

    def activate(self) -> None:
        """Run the command, but only if the button is selected."""
        if self.selected:
            self.command()

    def select(self, selected: bool) -> None:
        self.selected = selected


class ButtonHandler:
    """Keeps an ordered set of buttons with exactly one selected.

    Activation is requested with :meth:`activate` and carried out on the next
    :meth:`update`.
    """

    def __init__(self) -> None:
        self._buttons: list[Button] = []
        self._selected_index = 0
        self._activation_pending = False

    @property
    def buttons(self) -> tuple[Button, ...]:
        return tuple(self._buttons)

    def activate(self) -> None:
        """Request activation of the selected button on the next update."""
        self._activation_pending = True

    def update(self) -> None:
        if self._activation_pending:
            self._buttons[self._selected_index].activate()
            self._activation_pending = False

    def add_button(self, button: Button) -> None:
        """Add a button; the first one added becomes selected."""
        if any(existing is button for existing in self._buttons):
            raise ValueError("button is already handled")
        self._buttons.append(button)
        if len(self._buttons) == 1:
            self._buttons[self._selected_index].select(True)

    def _move_selection(self, step: int) -> None:
        self._buttons[self._selected_index].select(False)
        self._selected_index = (self._selected_index + step) % len(self._buttons)
        self._buttons[self._selected_index].select(True)

    def select_next(self) -> None:
        """Select the next button, wrapping to the first."""
        self._move_selection(1)

    def select_previous(self) -> None:
        """Select the previous button, wrapping to the last."""
        self._move_selection(-1)

    def selected_button(self) -> Button:
        """Return the selected button; raises IndexError if there are none."""
        return self._buttons[self._selected_index]

    def _first(self) -> Optional[Button]:
        return self._buttons[0] if self._buttons else None