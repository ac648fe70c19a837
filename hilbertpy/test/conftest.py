#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : conftest.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import pytest

test_order = [
    "environment",
    "bit", "gray_code", "rotation",
    "check_curve", "interlace",
    "hilbert", "hilbert_curve",
    "lookup_table",
    "hdf5_lookup_table_writer", "hdf5_lookup_table_parser",
    "log_writer",
    "visualize",
]


def pytest_collection_modifyitems(items):
    current_index = 0
    for test in test_order:
        indexes = []
        for id, item in enumerate(items):
            if "test_" + test + ".py" in item.nodeid:
                indexes.append(id)
        for id, index in enumerate(indexes):
            items[current_index + id], items[index] = items[index], items[current_index + id]
        current_index += len(indexes)
