#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : curve_table.py
created time : 2022/05/21
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import os, sys

cur_dir = os.path.dirname(os.path.abspath(__file__))
out_dir = os.path.join(cur_dir, "out")
sys.path.append(os.path.join(cur_dir, ".."))
import matplotlib.pyplot as plt
import hilbertpy as hp

num_dims, num_bits = 3, 2
curve = hp.HilbertCurve(num_dims, num_bits)

os.makedirs(out_dir, exist_ok=True)
log_writer = hp.io.LogWriter(
    os.path.join(out_dir, "hilbert_%d_dims_%d_bits.log" % (num_dims, num_bits)),
    curve,
    index=True,
    binary_point=True,
    coordinates=True,
    reencoded_index=True,
)
for index in range(curve.length):
    log_writer.write(index)
    print("i=%d p=%s" % (index, curve.to_binary_string(curve.decode(index))))

ax = hp.utils.plot_curve(curve, marker="o")
plt.savefig(os.path.join(out_dir, "hilbert_%d_dims_%d_bits.png" % (num_dims, num_bits)))
