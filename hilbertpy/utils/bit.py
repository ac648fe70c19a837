#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : bit.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""


def bit(x: int, i: int) -> int:
    return (x >> i) & 1


def with_bit(x: int, i: int, b: int) -> int:
    return (x & ~(1 << i)) | ((b & 1) << i)


def mask(i: int) -> int:
    """Bit mask with the i lowest bits set"""
    return (1 << i) - 1


def log2floor(x: int) -> int:
    """Index of the highest set bit of x, 0 is returned for x = 0"""
    if x == 0:
        return 0
    return int(x).bit_length() - 1


def trailing_ones(x: int) -> int:
    # x + 1 clears the trailing ones and sets the lowest unset bit
    lowest_unset_bit = ~x & (x + 1)
    return int(lowest_unset_bit).bit_length() - 1


def read_digit(x: int, i: int, num_dims: int) -> int:
    """Return the num_dims bits digit group of x at position i

    Parameters
    ----------
    x : int
        packed value
    i : int
        position of the digit group, counting from the least significant group
    num_dims : int
        width of a digit group
    """
    return (x >> (i * num_dims)) & mask(num_dims)


def write_digit(x: int, i: int, num_dims: int, digit: int) -> int:
    shift = i * num_dims
    return (x & ~(mask(num_dims) << shift)) | ((digit & mask(num_dims)) << shift)


def to_binary_string(x: int, width: int) -> str:
    if width == 0:
        return ""
    return bin(int(x))[2:].zfill(width)
