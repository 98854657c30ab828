#!/usr/bin/env python3
"""
Test script for the tolerance switch and trace helpers.
"""

import math
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from utils.precision_manager import (
    check_tolerance,
    get_round_decimals,
    get_tolerance,
    presets,
    set_tolerance,
)
from utils.trace_helpers import add_traceback, format_traceback


def test_default_tolerance():
    assert get_tolerance() == 1e-10
    assert get_round_decimals() == 6


def test_set_tolerance_presets():
    original = get_tolerance()
    try:
        for value in presets():
            set_tolerance(value)
            assert get_tolerance() == value
        with pytest.raises(ValueError, match="not allowed"):
            set_tolerance(0.5)
    finally:
        set_tolerance(original)


def test_presets_is_a_copy():
    values = presets()
    values.append(42.0)
    assert 42.0 not in presets()


def test_check_tolerance():
    assert check_tolerance(None) == get_tolerance()
    assert check_tolerance(1e-4) == 1e-4
    assert check_tolerance(1) == 1.0
    for bad in (0, -1e-6, math.nan, math.inf, -math.inf):
        with pytest.raises(ValueError):
            check_tolerance(bad)


class _Owner:
    def __init__(self):
        self.traceback_info = []


def test_add_traceback_targets():
    events = []
    add_traceback(events, 'reduce', '7.0 -> 0.71')
    assert events[0]['step'] == 'reduce'
    assert events[0]['info'] == '7.0 -> 0.71'
    assert 'timestamp' in events[0]
    assert 'stack' not in events[0]

    owner = _Owner()
    add_traceback(owner, 'sin', 'sin(1)', with_stack=True)
    assert owner.traceback_info[0]['stack']

    with pytest.raises(AttributeError):
        add_traceback(object(), 'sin', 'sin(1)')


def test_format_traceback():
    events = []
    for i in range(4):
        add_traceback(events, f'step{i}', f'info{i}')
    assert format_traceback(events) == ['step0: info0', 'step1: info1', 'step2: info2', 'step3: info3']
    assert format_traceback(events, last=2) == ['step2: info2', 'step3: info3']
    assert format_traceback(events, last=0) == []
