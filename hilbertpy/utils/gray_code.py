#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : gray_code.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

from hilbertpy.utils.bit import log2floor


def gray_encode(i: int) -> int:
    return i ^ (i >> 1)


def gray_decode(g: int) -> int:
    num_bits = log2floor(g) + 1
    i = g
    for shift in range(1, num_bits):
        i ^= g >> shift
    return i
