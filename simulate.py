"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Run the page table simulator.
"""

from sys import version_info
if version_info < (3, 8):
    print("ptsim requires Python 3.8+")
    exit()

try:
    import intervaltree
except ModuleNotFoundError as e:
    print("ptsim requires intervaltree: `pip install intervaltree`")
    exit()

from ptsim import cli

cli.run()
