from battlecity.client.events import ClickableCell, MouseButton, Signal


def test_signal_calls_slots_in_order_with_arguments():
    seen = []
    signal = Signal()
    signal.connect(lambda *args: seen.append(("first", args)))
    signal.connect(lambda *args: seen.append(("second", args)))
    signal.emit(1, "two")
    assert seen == [("first", (1, "two")), ("second", (1, "two"))]


def test_signal_without_slots_emits_to_nobody():
    signal = Signal()
    seen = []
    signal.emit("ignored")
    signal.connect(seen.append)
    signal.emit("kept")
    assert seen == ["kept"]


def test_left_press_reports_coordinates():
    cell = ClickableCell(3, 5)
    seen = []
    cell.clicked.connect(lambda row, col: seen.append((row, col)))
    assert cell.press(MouseButton.LEFT) is True
    assert seen == [(3, 5)]


def test_other_buttons_are_ignored():
    cell = ClickableCell(1, 2)
    seen = []
    cell.clicked.connect(lambda row, col: seen.append((row, col)))
    assert cell.press(MouseButton.RIGHT) is False
    assert cell.press(MouseButton.MIDDLE) is False
    assert seen == []