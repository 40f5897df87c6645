"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Console logging. Everything goes to stdout except errors, which go to stderr
so that printer output can be piped without the noise.
"""

# Standard Python deps
import sys

# Internal deps
from . import args


def _emit( tag:str, msg:str, stream=None ) -> None:
    print(f"[{tag}] {msg if msg else ''}", file=stream or sys.stdout)

def verbose( msg:str="" ) -> None:
    if (args.verbose or args.debug):
        _emit("VERBOSE", msg)

def debug( msg:str="" ) -> None:
    if (args.debug):
        _emit("DEBUG", msg)

def error( msg:str="" ) -> None:
    _emit("ERROR", msg, sys.stderr)
