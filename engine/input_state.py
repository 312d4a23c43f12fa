# engine/input_state.py


class InputState:
    """
    Latest pointer state as seen by the simulation.

    The front-end writes it from pygame events; every tick reads the cursor
    and consumes the click, so one click is seen by one tick only.
    """

    def __init__(self, cursor_x: float = 0.0):
        self.cursor_x: float = float(cursor_x)
        self._clicked: bool = False

    def move_cursor(self, x: float):
        self.cursor_x = float(x)

    def click(self):
        self._clicked = True

    def take_click(self) -> bool:
        clicked = self._clicked
        self._clicked = False
        return clicked
