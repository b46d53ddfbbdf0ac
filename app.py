import logging

import pandas as pd
import streamlit as st

from conversions import TABLE, labels
from flow import (
    ConversionSelected,
    ConvertPressed,
    InputChanged,
    MenuDismissed,
    MenuToggled,
    UiState,
    initial_state,
    reduce,
)
from settings import load_settings

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────
# Session state keys
# ─────────────────────────────────────────────────────────
STATE_KEY = "ui_state"
INPUT_KEY = "value_input"
MENU_KEY = "conversion_menu"


# ─────────────────────────────────────────────────────────
# State / event dispatch
# ─────────────────────────────────────────────────────────
def get_state() -> UiState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = initial_state()
    return st.session_state[STATE_KEY]


def dispatch(event) -> UiState:
    state = reduce(get_state(), event)
    st.session_state[STATE_KEY] = state
    return state


def _sync_input():
    state = dispatch(InputChanged(st.session_state.get(INPUT_KEY, "")))
    # the field shows the text with ',' already replaced by '.'
    st.session_state[INPUT_KEY] = state.input_text


def on_input_change():
    _sync_input()
    dispatch(MenuDismissed())


def on_menu_toggle():
    dispatch(MenuToggled())


def on_menu_pick():
    dispatch(ConversionSelected(st.session_state[MENU_KEY]))


def on_convert():
    # text typed without Enter only reaches us with the button click
    _sync_input()
    dispatch(MenuDismissed())
    state = dispatch(ConvertPressed())
    logger.info("convert pressed: %s", state.result_text)


def table_frame() -> pd.DataFrame:
    return pd.DataFrame(
        [{"Конверсия": e.label, "Формула": e.formula} for e in TABLE]
    )


# ─────────────────────────────────────────────────────────
# Streamlit UI
# ─────────────────────────────────────────────────────────
def render_selector(state: UiState):
    arrow = "▴" if state.is_menu_open else "▾"
    st.caption("Выберите конверсию")
    st.button(
        f"{state.selected_label}  {arrow}",
        key="menu_toggle",
        on_click=on_menu_toggle,
        use_container_width=True,
    )
    if state.is_menu_open:
        options = labels()
        index = options.index(state.selected_label) if state.selected_label in options else 0
        st.radio(
            "Выберите конверсию",
            options,
            index=index,
            key=MENU_KEY,
            on_change=on_menu_pick,
            label_visibility="collapsed",
        )


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    st.set_page_config(page_title=settings.page_title, page_icon="🔁", layout=settings.layout)
    st.title(f"🔁 {settings.page_title}")

    state = get_state()
    if INPUT_KEY not in st.session_state:
        st.session_state[INPUT_KEY] = state.input_text

    st.text_input("Введите значение", key=INPUT_KEY, on_change=on_input_change)
    render_selector(state)

    st.write(" ")
    st.button("Конвертировать", key="convert", type="primary", on_click=on_convert, use_container_width=True)

    state = get_state()
    if state.result_text:
        if state.is_error:
            st.error(state.result_text)
        else:
            st.success(state.result_text)

    with st.expander("Таблица конверсий"):
        st.dataframe(table_frame(), use_container_width=True, hide_index=True)


if __name__ == "__main__":
    main()
