#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : hilbert.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

from hilbertpy.utils.bit import trailing_ones, read_digit, write_digit
from hilbertpy.utils.gray_code import gray_encode, gray_decode
from hilbertpy.utils.rotation import rotate_right, rotate_left
from hilbertpy.utils.check_curve import check_curve, check_curve_value


def entry_point(index: int) -> int:
    """Entry vertex of the index-th sub-hypercube in the canonical ordering"""
    if index == 0:
        return 0
    return gray_encode(((index - 1) >> 1) << 1)


def intra_axis(index: int, num_dims: int) -> int:
    """Free axis of the index-th sub-hypercube"""
    if index == 0:
        return 0
    return trailing_ones(index - 1 + (index & 1)) % num_dims


def transform(entry: int, axis: int, digit: int, num_dims: int) -> int:
    return rotate_right(digit ^ entry, axis + 1, num_dims)


def transform_inverse(entry: int, axis: int, digit: int, num_dims: int) -> int:
    # axis = num_dims - 1 leads to a rotation of 0 bit in the outer transform
    return transform(
        rotate_right(entry, axis + 1, num_dims), num_dims - axis - 2, digit, num_dims
    )


def _update_state(entry: int, axis: int, digit: int, num_dims: int):
    entry ^= rotate_left(entry_point(digit), axis + 1, num_dims)
    axis = (axis + intra_axis(digit, num_dims) + 1) % num_dims
    return entry, axis


def encode(point: int, num_dims: int, num_bits: int) -> int:
    """Convert a packed point into its index on the hilbert curve

    Parameters
    ----------
    point : int
        interlaced point, num_bits digit groups of num_dims bits, bit j of a
        digit group belongs to axis j
    num_dims : int
        number of dimensions
    num_bits : int
        number of bits per dimension (order of the curve)

    Returns
    -------
    int
        hilbert index of point in [0, 2^(num_dims*num_bits))
    """
    num_dims, num_bits = check_curve(num_dims, num_bits)
    point = check_curve_value(point, num_dims, num_bits)
    index, entry, axis = 0, 0, 0
    for level in range(num_bits - 1, -1, -1):
        digit = transform(entry, axis, read_digit(point, level, num_dims), num_dims)
        digit = gray_decode(digit)
        index = (index << num_dims) | digit
        entry, axis = _update_state(entry, axis, digit, num_dims)
    return index


def decode(index: int, num_dims: int, num_bits: int) -> int:
    """Convert a hilbert index into the packed point it locates

    Parameters
    ----------
    index : int
        hilbert index in [0, 2^(num_dims*num_bits))
    num_dims : int
        number of dimensions
    num_bits : int
        number of bits per dimension (order of the curve)

    Returns
    -------
    int
        interlaced point
    """
    num_dims, num_bits = check_curve(num_dims, num_bits)
    index = check_curve_value(index, num_dims, num_bits)
    point, entry, axis = 0, 0, 0
    for level in range(num_bits - 1, -1, -1):
        digit = read_digit(index, level, num_dims)
        point = write_digit(
            point, level, num_dims,
            transform_inverse(entry, axis, gray_encode(digit), num_dims)
        )
        entry, axis = _update_state(entry, axis, digit, num_dims)
    return point
