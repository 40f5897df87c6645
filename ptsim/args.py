"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Parse command-line arguments to be accessible by any other importing file in the
project. The parsed values are stored as module attributes so that `log` and
the dispatcher can read them without passing them around. Until parse() is
called the defaults below apply, which is what library users and tests get.
"""

# Standard Python deps
import argparse
from typing import List, Optional


_parser = argparse.ArgumentParser(
    prog="ptsim",
    description="single-level page table simulator",
    epilog="commands: np pid count | pfm | ppt pid | kp pid | "
           "lb pid addr | sb pid addr val | pmap",
)

_parser.add_argument(
    "commands",
    metavar="CMD",
    help="simulator commands, run left to right",
    nargs=argparse.REMAINDER,
)

_parser.add_argument(
    "-v",
    help="-v for verbose, -vv for debug",
    action="count",
    default=0,
)

commands = []
verbose = False
debug = False


def parse( argv:Optional[List[str]]=None ) -> List[str]:
    """
    Parse argv (default: sys.argv[1:]) and publish the results.
    """
    global commands, verbose, debug
    _args = _parser.parse_args(argv)
    commands = list(_args.commands)
    verbose = _args.v >= 1
    debug = _args.v >= 2
    return commands


def reset() -> None:
    """
    Restore the defaults, e.g. between two in-process runs.
    """
    global commands, verbose, debug
    commands = []
    verbose = False
    debug = False
