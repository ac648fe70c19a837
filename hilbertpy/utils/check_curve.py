#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : check_curve.py
created time : 2022/05/14
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import numpy as np
from hilbertpy import env
from hilbertpy.error import *


def _check_integer(val, name: str) -> int:
    if isinstance(val, (bool, np.bool_)) or not isinstance(val, (int, np.integer)):
        raise TypeError("%s should be an integer, while %s provided" % (name, type(val)))
    return int(val)


def check_num_dims(num_dims) -> int:
    num_dims = _check_integer(num_dims, "num_dims")
    if num_dims <= 0:
        raise InvalidDimensionError(
            "num_dims should be a positive integer, while %d provided" % num_dims
        )
    return num_dims


def check_num_bits(num_bits) -> int:
    num_bits = _check_integer(num_bits, "num_bits")
    if num_bits < 0:
        raise InvalidOrderError(
            "num_bits should be a non-negative integer, while %d provided" % num_bits
        )
    return num_bits


def check_curve(num_dims, num_bits):
    num_dims = check_num_dims(num_dims)
    num_bits = check_num_bits(num_bits)
    if num_dims * num_bits > env.word_width:
        raise WidthOverflowError(
            "Curve with %d dimensions and %d bits requires %d bits, exceeding the %d bits word width"
            % (num_dims, num_bits, num_dims * num_bits, env.word_width)
        )
    return num_dims, num_bits


def check_curve_value(val, num_dims: int, num_bits: int) -> int:
    val = _check_integer(val, "Packed value")
    width = num_dims * num_bits
    if val < 0 or val >> width != 0:
        raise ValueOutOfRangeError(
            "%d is out of the range [0, 2^%d) of a curve with %d dimensions and %d bits"
            % (val, width, num_dims, num_bits)
        )
    return val


def check_coordinates(coordinates, num_dims: int, num_bits: int):
    coordinates = [_check_integer(i, "Coordinate") for i in coordinates]
    if len(coordinates) != num_dims:
        raise ArrayDimError(
            "%d coordinates are required, while %d provided"
            % (num_dims, len(coordinates))
        )
    for coordinate in coordinates:
        if coordinate < 0 or coordinate >> num_bits != 0:
            raise ValueOutOfRangeError(
                "Coordinate %d is out of the range [0, 2^%d)" % (coordinate, num_bits)
            )
    return coordinates
