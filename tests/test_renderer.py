"""Tests del renderizador sobre un lienzo NumPy (sin abrir ventanas)."""

import pytest

cv2 = pytest.importorskip("cv2")
np = pytest.importorskip("numpy")

from config.settings import CalculatorConfig
from core.calculator import Calculator
from core.history import History
from ui.renderer import BACKGROUND, UIRenderer


@pytest.fixture
def config():
    return CalculatorConfig()


@pytest.fixture
def renderer(config):
    return UIRenderer(config.window_width, config.window_height, config)


@pytest.fixture
def calc():
    return Calculator(History())


def test_new_frame_shape(renderer, config):
    frame = renderer.new_frame()
    assert frame.shape == (config.window_height, config.window_width, 3)
    assert frame.dtype == np.uint8
    assert tuple(frame[0, 0]) == BACKGROUND


def test_render_draws_display(renderer, calc):
    frame = renderer.render(calc)
    blank = renderer.new_frame()
    assert not np.array_equal(frame, blank)


def test_render_error_state(renderer, calc):
    for key in "6/0":
        if key == "/":
            calc.choose_operator(key)
        else:
            calc.append_digit(key)
    calc.equals()
    frame = renderer.render(calc)
    assert frame.shape[2] == 3


def test_long_numbers_fit(renderer, calc):
    for _ in range(40):
        calc.append_digit("9")
    frame = renderer.render(calc)
    assert frame.shape == (renderer.height, renderer.width, 3)


def test_history_panel_changes_frame(renderer, calc):
    calc.history.add("1 + 1", "2")
    closed = renderer.render(calc, history_open=False)
    opened = renderer.render(calc, history_open=True)
    assert not np.array_equal(closed, opened)


def test_empty_history_panel(renderer, calc):
    frame = renderer.render(calc, history_open=True)
    assert frame.shape == (renderer.height, renderer.width, 3)


def test_memory_indicator(renderer, calc):
    without_memory = renderer.render(calc)
    calc.append_digit("7")
    calc.memory_add()
    calc.clear()
    with_memory = renderer.render(calc)
    region = (slice(40, 90), slice(renderer.width - 330, renderer.width - 40))
    assert not np.array_equal(without_memory[region], with_memory[region])


def test_feedback_expires(renderer, calc, config):
    renderer.show_feedback("OK")
    assert renderer.feedback_timer == config.feedback_duration
    for _ in range(config.feedback_duration):
        renderer.render(calc)
    assert renderer.feedback_timer == 0


def test_key_guide_can_be_hidden(config, calc):
    config.show_key_guide = False
    hidden = UIRenderer(config.window_width, config.window_height, config)
    shown = UIRenderer(config.window_width, config.window_height, CalculatorConfig())
    assert not np.array_equal(hidden.render(calc), shown.render(calc))


def test_history_capacity_fits_panel(renderer, config):
    assert renderer.history_capacity() == 5
    tall = CalculatorConfig()
    tall.window_height = 1000
    assert UIRenderer(tall.window_width, tall.window_height, tall).history_capacity() == tall.history_rows()
