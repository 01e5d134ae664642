"""Typing."""

from __future__ import annotations

from matsubara import numpy

from typing import Any


Array = numpy.ndarray[Any, numpy.dtype[Any]]
