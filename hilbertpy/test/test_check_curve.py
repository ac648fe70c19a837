#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : test_check_curve.py
created time : 2022/05/14
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import pytest
import numpy as np
from hilbertpy.utils import *
from hilbertpy.error import *


def test_check_curve():
    assert check_curve(2, 2) == (2, 2)
    assert check_curve(8, 8) == (8, 8)
    assert check_curve(64, 1) == (64, 1)
    assert check_curve(3, 0) == (3, 0)
    num_dims, num_bits = check_curve(np.int32(2), np.int64(3))
    assert num_dims == 2 and isinstance(num_dims, int)
    assert num_bits == 3 and isinstance(num_bits, int)

    with pytest.raises(InvalidDimensionError):
        check_curve(0, 2)

    with pytest.raises(InvalidDimensionError):
        check_num_dims(-1)

    with pytest.raises(InvalidOrderError):
        check_curve(2, -1)

    with pytest.raises(WidthOverflowError):
        check_curve(8, 9)

    with pytest.raises(WidthOverflowError):
        check_curve(65, 1)

    with pytest.raises(WidthOverflowError):
        check_curve(1, 65)

    with pytest.raises(TypeError):
        check_curve(2.0, 2)

    with pytest.raises(TypeError):
        check_num_bits(True)


def test_check_curve_value():
    assert check_curve_value(15, 2, 2) == 15
    assert check_curve_value(0, 3, 0) == 0
    assert check_curve_value(np.uint64(2**64 - 1), 8, 8) == 2**64 - 1

    with pytest.raises(ValueOutOfRangeError):
        check_curve_value(16, 2, 2)

    with pytest.raises(ValueOutOfRangeError):
        check_curve_value(-1, 2, 2)

    with pytest.raises(ValueOutOfRangeError):
        check_curve_value(1, 3, 0)

    with pytest.raises(TypeError):
        check_curve_value(1.0, 2, 2)


def test_check_coordinates():
    assert check_coordinates((1, 2), 2, 2) == [1, 2]
    assert check_coordinates(np.array([3, 0, 1]), 3, 2) == [3, 0, 1]

    with pytest.raises(ArrayDimError):
        check_coordinates([1, 2, 3], 2, 2)

    with pytest.raises(ValueOutOfRangeError):
        check_coordinates([4, 0], 2, 2)

    with pytest.raises(ValueOutOfRangeError):
        check_coordinates([-1, 0], 2, 2)
