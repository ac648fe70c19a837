#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : test_environment.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import pytest
import numpy as np
from hilbertpy import env
from hilbertpy.utils import check_curve
from hilbertpy.error import *


def test_attributes():
    assert env.word_width == 64
    assert env.NUMPY_UINT == np.uint64
    assert env.NUMPY_INT == np.int64


def test_exceptions():
    with pytest.raises(EnvironmentVariableError):
        env.set_word_width("A")

    with pytest.raises(EnvironmentVariableError):
        env.set_word_width(16)

    with pytest.raises(EnvironmentVariableError):
        env.set_word_width(None)


def test_set_word_width():
    try:
        env.set_word_width("32")
        assert env.word_width == 32
        assert env.NUMPY_UINT == np.uint32
        assert check_curve(4, 8) == (4, 8)
        with pytest.raises(WidthOverflowError):
            check_curve(4, 9)
    finally:
        env.set_word_width(64)
    assert check_curve(4, 9) == (4, 9)
