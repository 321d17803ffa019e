#!/usr/bin/env python

"""
    boxlayout
    =========

    boxlayout computes the geometry of trees of styled boxes.

"""

from setuptools import setup

setup()
