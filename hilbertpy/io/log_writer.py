#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : log_writer.py
created time : 2022/05/21
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

from hilbertpy.core import HilbertCurve
from hilbertpy.error import *


class LogWriter:
    def __init__(
        self,
        file_path: str,
        curve: HilbertCurve,
        index: bool = False,
        point: bool = False,
        binary_point: bool = False,
        coordinates: bool = False,
        reencoded_index: bool = False,
        seperator: str = "\t",
    ) -> None:
        # Input
        if not file_path.endswith(".log"):
            raise FileFormatError("The file should end with .log suffix")
        if not isinstance(curve, HilbertCurve):
            raise TypeError(
                "The curve attribute should be the instance of hilbertpy.core.HilbertCurve class"
            )
        self._file_path = file_path
        self._curve = curve
        self._index = index
        self._point = point
        self._binary_point = binary_point
        self._coordinates = coordinates
        self._reencoded_index = reencoded_index
        self._seperator = seperator
        # Refresh file
        open(file_path, "w").close()
        # Dump head
        self._write_header()

    def _write_info(self, info):
        with open(self._file_path, "a") as f:
            print(info, file=f, end="")

    def write(self, index: int):
        point = self._curve.decode(index)
        write_info = ""
        if self._index:
            write_info += "%d" % index + self._seperator
        if self._point:
            write_info += "%d" % point + self._seperator
        if self._binary_point:
            write_info += self._curve.to_binary_string(point) + self._seperator
        if self._coordinates:
            write_info += self._get_coordinates(index) + self._seperator
        if self._reencoded_index:
            write_info += "%d" % self._curve.encode(point) + self._seperator
        if write_info != "":
            write_info += "\n"
        self._write_info(write_info)

    def _write_header(self):
        header = ""
        if self._index:
            header += "Index" + self._seperator
        if self._point:
            header += "Point" + self._seperator
        if self._binary_point:
            header += "Binary Point" + self._seperator
        if self._coordinates:
            header += "Coordinates" + self._seperator
        if self._reencoded_index:
            header += "Re-encoded Index" + self._seperator
        if header != "":
            header += "\n"
        self._write_info(header)

    def _get_coordinates(self, index: int):
        return "(%s)" % ", ".join(["%d" % i for i in self._curve.decode_coordinates(index)])

    @property
    def file_path(self) -> str:
        return self._file_path
