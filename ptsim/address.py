"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
from typing import Dict

# Internal deps
from . import log


class Bitfield:
    """
    Class representing a contiguous bitfield [hi:lo] of an address.
    """
    def __init__( self, hi:int, lo:int ):
        assert(hi >= lo >= 0)
        self.hi = hi
        self.lo = lo
        self.mask = (1 << (hi - lo + 1)) - 1


    def extract( self, value:int ) -> int:
        """
        Read this field out of value.
        """
        return (value >> self.lo) & self.mask


    def insert( self, value:int ) -> int:
        """
        Position value in this field. Bits that do not fit are dropped.
        """
        return (value & self.mask) << self.lo


    def __repr__( self ) -> str:
        return f"Bitfield({self.hi}, {self.lo})"


class AddressLayout:
    """
    Class describing how an address of a given width is cut into fields.
    """
    def __init__( self, name:str, bits:int ):
        self.name = name
        self.bits = bits
        self.fields = {}


    def field( self, hi:int, lo:int, name:str ) -> Bitfield:
        """
        Add a named bitfield to this layout.
        """
        assert(hi < self.bits)
        self.fields[name] = Bitfield(hi, lo)
        log.debug(f"{self.name}.{name}=[{hi}:{lo}]")
        return self.fields[name]


    @property
    def limit( self ) -> int:
        return 1 << self.bits


    def split( self, addr:int ) -> Dict[str, int]:
        """
        Cut addr into its named fields.
        """
        return {name: f.extract(addr) for name, f in self.fields.items()}


    def compose( self, **values:int ) -> int:
        """
        Build an address from named field values; missing fields are zero.
        """
        addr = 0
        for name, value in values.items():
            addr = addr | self.fields[name].insert(value)
        return addr
