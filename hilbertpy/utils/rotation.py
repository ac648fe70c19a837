#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : rotation.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

from hilbertpy.utils.bit import mask


def rotate_right(x: int, shift: int, width: int) -> int:
    """Circularly rotate the width lowest bits of x right by shift

    Bits at position >= width are kept untouched. shift should lie in
    [0, width]; both ends are no-op.
    """
    if shift == 0 or shift == width:
        return x
    field_mask = mask(width)
    field = x & field_mask
    rotated = ((field >> shift) | (field << (width - shift))) & field_mask
    return rotated | (x & ~field_mask)


def rotate_left(x: int, shift: int, width: int) -> int:
    """Circularly rotate the width lowest bits of x left by shift"""
    if shift == 0 or shift == width:
        return x
    field_mask = mask(width)
    field = x & field_mask
    rotated = ((field << shift) | (field >> (width - shift))) & field_mask
    return rotated | (x & ~field_mask)
