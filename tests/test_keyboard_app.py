"""Tests del mapeo de teclas de la aplicación (sin abrir ventanas)."""

import pytest

pytest.importorskip("cv2")

from app.keyboard_app import KeyboardCalculatorApp
from config.settings import CalculatorConfig


ENTER = 13
BACKSPACE = 8
ESC = 27


@pytest.fixture
def app():
    return KeyboardCalculatorApp(CalculatorConfig())


def type_keys(app, text):
    for char in text:
        assert app.process(ord(char))


def test_no_key_is_ignored(app):
    assert app.process(255)
    assert app.process(-1)
    assert app.calc.current_operand == "0"


def test_quit(app):
    assert not app.process(ord("q"))


def test_expression_with_enter(app):
    type_keys(app, "12+5")
    assert app.calc.previous_operand == "12 +"
    app.process(ENTER)
    assert app.calc.current_operand == "17"
    assert app.history[0].expression == "12 + 5"
    assert app.ui.feedback_msg == "= 17"


def test_equals_key(app):
    type_keys(app, "2+3*4=")
    assert app.calc.current_operand == "14"


def test_division_by_zero_feedback(app):
    type_keys(app, "6/0=")
    assert app.calc.is_error()
    assert app.ui.feedback_msg == "Error"


def test_backspace(app):
    type_keys(app, "123")
    app.process(BACKSPACE)
    assert app.calc.current_operand == "12"
    app.process(127)
    assert app.calc.current_operand == "1"


def test_escape_clears(app):
    type_keys(app, "9*")
    app.process(ESC)
    assert app.calc.previous_operand == ""
    assert app.calc.current_operand == "0"


def test_escape_closes_history_first(app):
    type_keys(app, "9*h")
    assert app.history_open
    app.process(ESC)
    assert not app.history_open
    assert app.calc.previous_operand == "9 *"


def test_clear_key(app):
    type_keys(app, "45c")
    assert app.calc.current_operand == "0"


def test_history_recall_by_digit(app):
    type_keys(app, "6*7=c")
    type_keys(app, "1+1=")
    type_keys(app, "h1")
    assert not app.history_open
    assert app.calc.current_operand == "42"
    assert app.calc.reset_input


def test_history_digit_out_of_range(app):
    type_keys(app, "h5")
    assert app.history_open
    assert app.calc.current_operand == "0"


def test_clear_history_key(app):
    type_keys(app, "1+1=x")
    assert len(app.history) == 0


def test_memory_keys(app):
    type_keys(app, "8p")
    assert app.calc.get_memory() == 8
    type_keys(app, "c3n")
    assert app.calc.get_memory() == 5
    type_keys(app, "cr")
    assert app.calc.current_operand == "5"
    type_keys(app, "l")
    assert not app.calc.has_memory()


def test_history_limit_from_config():
    config = CalculatorConfig()
    config.history_limit = 3
    app = KeyboardCalculatorApp(config)
    for _ in range(5):
        type_keys(app, "1+1=")
    assert len(app.history) == 3


def test_unmapped_key_ignored(app):
    type_keys(app, "5z")
    assert app.calc.current_operand == "5"


def test_history_recall_limited_to_visible_rows(app):
    capacity = app.ui.history_capacity()
    assert capacity == 5
    for i in range(capacity + 2):
        type_keys(app, f"{i}+0=")
    type_keys(app, f"h{capacity}")
    assert app.history_open
    assert app.calc.current_operand == str(capacity + 1)
    type_keys(app, f"{capacity - 1}")
    assert not app.history_open
    assert app.calc.current_operand == "2"
