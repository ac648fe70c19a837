#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : test_gray_code.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import pytest
from hilbertpy.utils import *


def test_gray_encode():
    assert [gray_encode(i) for i in range(8)] == [0, 1, 3, 2, 6, 7, 5, 4]
    assert gray_encode(2**64 - 1) == 2**63


def test_gray_decode():
    assert [gray_decode(i) for i in [0, 1, 3, 2, 6, 7, 5, 4]] == list(range(8))
    assert gray_decode(2**63) == 2**64 - 1
    for i in range(4096):
        assert gray_decode(gray_encode(i)) == i
    for i in [2**32, 2**40 + 12345, 2**63 + 1, 2**64 - 2, 0xDEADBEEFCAFEBABE]:
        assert gray_decode(gray_encode(i)) == i


def test_gray_code_neighbor():
    num_codes = 4096
    codes = [gray_encode(i) for i in range(num_codes)]
    assert len(set(codes)) == num_codes
    for i in range(num_codes - 1):
        assert bin(codes[i] ^ codes[i + 1]).count("1") == 1
