"""Tests for DESKCALC_* configuration loading."""

import pytest

from deskcalc import Calculator
from deskcalc.environment import CalculatorConfig, ConfigError, load_config, parse_symbols
from deskcalc.models import Operator


def test_defaults_with_empty_env():
    config = load_config({})
    assert config == CalculatorConfig()
    assert config.display_width == 16
    assert config.exponent_digits == 8
    assert config.extra_symbols == {}


def test_reads_overrides():
    config = load_config({
        "DESKCALC_DISPLAY_WIDTH": "10",
        "DESKCALC_EXPONENT_DIGITS": "3",
        "DESKCALC_OPERATOR_SYMBOLS": "x=multiply, :=/",
    })
    assert config.display_width == 10
    assert config.exponent_digits == 3
    assert config.extra_symbols == {"x": Operator.MULTIPLY, ":": Operator.DIVIDE}


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("DESKCALC_DISPLAY_WIDTH", "12")
    assert load_config().display_width == 12


@pytest.mark.parametrize("env", [
    {"DESKCALC_DISPLAY_WIDTH": "wide"},
    {"DESKCALC_DISPLAY_WIDTH": "0"},
    {"DESKCALC_EXPONENT_DIGITS": "-1"},
    {"DESKCALC_OPERATOR_SYMBOLS": "x"},
    {"DESKCALC_OPERATOR_SYMBOLS": "x=modulo"},
    {"DESKCALC_OPERATOR_SYMBOLS": "+=subtract"},
    {"DESKCALC_OPERATOR_SYMBOLS": "==add"},
    {"DESKCALC_OPERATOR_SYMBOLS": "5=add"},
])
def test_malformed_values_raise(env):
    with pytest.raises(ConfigError):
        load_config(env)


def test_parse_symbols_accepts_names_and_symbols():
    assert parse_symbols("x=MULTIPLY,:=/, ,") == {"x": Operator.MULTIPLY, ":": Operator.DIVIDE}


def test_config_drives_engine():
    config = load_config({
        "DESKCALC_DISPLAY_WIDTH": "4",
        "DESKCALC_EXPONENT_DIGITS": "2",
        "DESKCALC_OPERATOR_SYMBOLS": "x=*",
    })
    calc = Calculator(config)
    for d in "123":
        calc.input_digit(d)
    calc.set_operator("x")
    for d in "100":
        calc.input_digit(d)
    calc.press_equals()
    assert calc.current_entry == "12300"
    assert calc.current_display_value() == "1.23e+4"
