#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : test_bit.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import pytest
from hilbertpy.utils import *


def test_bit():
    assert bit(0b1010, 0) == 0
    assert bit(0b1010, 1) == 1
    assert bit(0b1010, 3) == 1
    assert bit(0b1010, 10) == 0
    assert bit(2**63, 63) == 1


def test_with_bit():
    assert with_bit(0b1010, 0, 1) == 0b1011
    assert with_bit(0b1010, 3, 0) == 0b0010
    assert with_bit(0b1010, 1, 1) == 0b1010
    assert with_bit(0, 63, 1) == 2**63


def test_mask():
    assert mask(0) == 0
    assert mask(1) == 1
    assert mask(3) == 0b111
    assert mask(64) == 2**64 - 1


def test_log2floor():
    assert log2floor(0) == 0
    assert log2floor(1) == 0
    assert log2floor(2) == 1
    assert log2floor(3) == 1
    assert log2floor(0b1011) == 3
    assert log2floor(2**63) == 63
    assert log2floor(2**64 - 1) == 63


def test_trailing_ones():
    assert trailing_ones(0) == 0
    assert trailing_ones(1) == 1
    assert trailing_ones(0b0111) == 3
    assert trailing_ones(0b1011) == 2
    assert trailing_ones(0b1010) == 0
    assert trailing_ones(2**64 - 1) == 64


def test_read_digit():
    assert read_digit(0b101110, 0, 3) == 0b110
    assert read_digit(0b101110, 1, 3) == 0b101
    assert read_digit(0b101110, 2, 3) == 0
    assert read_digit(0b1001, 1, 2) == 0b10


def test_write_digit():
    assert write_digit(0b101110, 1, 3, 0b011) == 0b011110
    assert write_digit(0b101110, 0, 3, 0) == 0b101000
    assert write_digit(0, 2, 2, 0b11) == 0b110000
    # Bits beyond the digit width are ignored
    assert write_digit(0, 0, 2, 0b111) == 0b11


def test_to_binary_string():
    assert to_binary_string(5, 6) == "000101"
    assert to_binary_string(9, 4) == "1001"
    assert to_binary_string(0, 3) == "000"
    assert to_binary_string(0, 0) == ""
    assert to_binary_string(2**64 - 1, 64) == "1" * 64
