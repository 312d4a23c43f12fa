from engine.input_state import InputState


def test_click_is_consumed_once():
    inputs = InputState()
    assert not inputs.take_click()
    inputs.click()
    inputs.click()
    assert inputs.take_click()
    assert not inputs.take_click()


def test_cursor_is_latest_value():
    inputs = InputState()
    assert inputs.cursor_x == 0
    inputs.move_cursor(12)
    inputs.move_cursor(40.5)
    assert inputs.cursor_x == 40.5
