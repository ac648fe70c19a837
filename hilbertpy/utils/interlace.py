#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : interlace.py
created time : 2022/05/14
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

from hilbertpy.utils.bit import bit, with_bit


def interlace(coordinates, num_bits: int) -> int:
    """Pack coordinates into a single integer

    Bit ``level`` of coordinate ``axis`` is stored at bit
    ``level * num_dims + axis`` of the packed point, so that each num_dims
    bits digit group holds one bit of every axis.
    """
    num_dims = len(coordinates)
    point = 0
    for axis, coordinate in enumerate(coordinates):
        for level in range(num_bits):
            point = with_bit(point, level * num_dims + axis, bit(coordinate, level))
    return point


def deinterlace(point: int, num_dims: int, num_bits: int) -> tuple:
    coordinates = [0] * num_dims
    for axis in range(num_dims):
        for level in range(num_bits):
            coordinates[axis] = with_bit(
                coordinates[axis], level, bit(point, level * num_dims + axis)
            )
    return tuple(coordinates)
