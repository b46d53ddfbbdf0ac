"""
Screen tests: the Streamlit script run headless through AppTest.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from app import INPUT_KEY, MENU_KEY, STATE_KEY, table_frame
from conversions import labels
from flow import ERROR_MESSAGE

APP_PATH = Path(__file__).resolve().parents[1] / "app.py"


@pytest.fixture
def at():
    app = AppTest.from_file(str(APP_PATH), default_timeout=30)
    app.run()
    return app


def test_table_frame_lists_every_conversion():
    df = table_frame()
    assert list(df.columns) == ["Конверсия", "Формула"]
    assert df["Конверсия"].tolist() == labels()
    assert df["Формула"].iloc[0] == "v × 0.621371"


def test_first_render_awaits_input(at):
    assert not at.exception
    assert at.session_state[STATE_KEY].selected_label == labels()[0]
    assert len(at.success) == 0
    assert len(at.error) == 0
    assert len(at.radio) == 0


def test_convert_uses_typed_text(at):
    at.text_input(key=INPUT_KEY).input("1")
    at.button(key="convert").click().run()
    assert at.session_state[STATE_KEY].input_text == "1"
    assert at.success[0].value == "Result: 0.62"
    assert len(at.error) == 0


def test_comma_input_is_normalized(at):
    at.text_input(key=INPUT_KEY).input("12,5")
    at.button(key="convert").click().run()
    assert at.session_state[STATE_KEY].input_text == "12.5"
    assert at.success[0].value == "Result: 7.77"


def test_bad_input_shows_error_box(at):
    at.text_input(key=INPUT_KEY).input("abc")
    at.button(key="convert").click().run()
    assert at.error[0].value == ERROR_MESSAGE
    assert len(at.success) == 0


def test_picking_conversion_closes_menu_and_clears_result(at):
    at.text_input(key=INPUT_KEY).input("100")
    at.button(key="convert").click().run()
    assert len(at.success) == 1

    at.button(key="menu_toggle").click().run()
    assert at.session_state[STATE_KEY].is_menu_open
    assert at.radio(key=MENU_KEY).options == labels()

    at.radio(key=MENU_KEY).set_value("°C → °F").run()
    state = at.session_state[STATE_KEY]
    assert state.selected_label == "°C → °F"
    assert not state.is_menu_open
    assert state.result_text == ""
    assert len(at.radio) == 0
    assert len(at.success) == 0

    at.button(key="convert").click().run()
    assert at.success[0].value == "Result: 212.00"
