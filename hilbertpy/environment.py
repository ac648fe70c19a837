#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : environment.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import os
import numpy as np
from hilbertpy.error import EnvironmentVariableError

WORD_WIDTH_VARIABLE = "HILBERTPY_WORD_WIDTH"
SUPPORTED_WORD_WIDTH = {
    32: (np.uint32, np.int32),
    64: (np.uint64, np.int64),
}


class Environment:
    def __init__(self, word_width=64) -> None:
        self.set_word_width(word_width)

    def set_word_width(self, word_width):
        try:
            word_width = int(word_width)
        except (TypeError, ValueError):
            raise EnvironmentVariableError(
                "Word width should be an integer, while %s provided" % word_width
            )
        if word_width not in SUPPORTED_WORD_WIDTH:
            raise EnvironmentVariableError(
                "Only %s bits word width are supported, while %d provided"
                % (list(SUPPORTED_WORD_WIDTH.keys()), word_width)
            )
        self._word_width = word_width
        self.NUMPY_UINT, self.NUMPY_INT = SUPPORTED_WORD_WIDTH[word_width]

    @property
    def word_width(self) -> int:
        return self._word_width


env = Environment(os.environ.get(WORD_WIDTH_VARIABLE, 64))
