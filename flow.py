"""Interaction flow for the converter screen.

The screen state is an immutable ``UiState``; every user action is an
event and ``reduce`` returns the next state. Nothing here imports
Streamlit, so the whole flow runs in plain unit tests.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum

from conversions import Conversion, ConversionError, labels

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "input or selection error"
RESULT_PREFIX = "Result: "

CENTS = Decimal("0.01")
# wide enough to quantize the largest double to cents
_FORMAT_CONTEXT = Context(prec=400)


class InvalidInputError(ConversionError):
    pass


class Phase(Enum):
    AWAITING_INPUT = "awaiting input"
    RESULT_SHOWN = "result shown"


@dataclass(frozen=True)
class UiState:
    input_text: str = ""
    selected_label: str = ""
    result_text: str = ""
    is_menu_open: bool = False

    @property
    def phase(self) -> Phase:
        return Phase.RESULT_SHOWN if self.result_text else Phase.AWAITING_INPUT

    @property
    def is_error(self) -> bool:
        return self.result_text == ERROR_MESSAGE


# ─────────────────────────────────────────────────────────
# Events
# ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class InputChanged:
    text: str


@dataclass(frozen=True)
class MenuToggled:
    pass


@dataclass(frozen=True)
class MenuDismissed:
    pass


@dataclass(frozen=True)
class ConversionSelected:
    label: str


@dataclass(frozen=True)
class ConvertPressed:
    pass


# ─────────────────────────────────────────────────────────
# Validate / apply / format
# ─────────────────────────────────────────────────────────
def normalize_input(text: str) -> str:
    return text.replace(",", ".")


def parse_value(text: str) -> float:
    """Parse user text as a float, accepting ',' as the decimal separator.

    ``NaN`` and ``Infinity`` are valid input. Underscore digit groups are
    rejected even though ``float()`` would take them.
    """
    s = normalize_input(text).strip()
    if not s or "_" in s:
        raise InvalidInputError(f"not a number: {text!r}")
    try:
        return float(s)
    except ValueError:
        raise InvalidInputError(f"not a number: {text!r}") from None


def format_number(value: float) -> str:
    """Two decimals, ties rounded half-up from the shortest decimal form.

    Non-finite values are spelled ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    d = Decimal(repr(float(value))).quantize(CENTS, rounding=ROUND_HALF_UP, context=_FORMAT_CONTEXT)
    return f"{d:f}"


def format_result(value: float) -> str:
    return f"{RESULT_PREFIX}{format_number(value)}"


def convert(text: str, label: str) -> float:
    value = parse_value(text)
    return Conversion.from_label(label).apply(value)


def convert_text(text: str, label: str) -> str:
    """Run the whole flow and return what the result display shows."""
    try:
        result = convert(text, label)
    except ConversionError as e:
        logger.debug("conversion rejected: %s", e)
        return ERROR_MESSAGE
    logger.debug("converted %r with %r -> %r", text, label, result)
    return format_result(result)


# ─────────────────────────────────────────────────────────
# State transitions
# ─────────────────────────────────────────────────────────
def initial_state() -> UiState:
    options = labels()
    return UiState(selected_label=options[0] if options else "")


def reduce(state: UiState, event) -> UiState:
    if isinstance(event, InputChanged):
        return replace(state, input_text=normalize_input(event.text))
    if isinstance(event, MenuToggled):
        return replace(state, is_menu_open=not state.is_menu_open)
    if isinstance(event, MenuDismissed):
        return replace(state, is_menu_open=False)
    if isinstance(event, ConversionSelected):
        # switching conversion drops the previous result
        return replace(state, selected_label=event.label, is_menu_open=False, result_text="")
    if isinstance(event, ConvertPressed):
        return replace(state, result_text=convert_text(state.input_text, state.selected_label))
    raise TypeError(f"unknown event: {event!r}")
