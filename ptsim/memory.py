"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Internal deps
from . import log
from . import mmu
from .errors import OutOfBounds


class PhysicalMemory:
    """
    Class representing simulated RAM.

    The allocation bitmap, the process directory, every page table and every
    data page all live in this one buffer. Nothing else holds memory state.
    """
    def __init__( self, size_bytes:int=mmu.MEM_SIZE ):
        if size_bytes != mmu.PAGE_COUNT * mmu.PAGE_SIZE:
            raise ValueError(f"size_bytes must be {mmu.PAGE_COUNT * mmu.PAGE_SIZE}")
        self._mem = bytearray(size_bytes)


    @property
    def size_bytes( self ) -> int:
        return len(self._mem)


    def initialize( self ) -> None:
        """
        Zero all memory, then mark page 0 (bitmap + directory) as allocated.
        """
        self._mem[:] = bytes(self.size_bytes)
        self._mem[mmu.BITMAP_BASE] = 1
        log.debug(f"initialized {self.size_bytes} bytes, page 0 reserved")


    def _check( self, paddr:int ) -> None:
        if paddr < 0 or paddr >= self.size_bytes:
            raise OutOfBounds(paddr, self.size_bytes)


    def read_byte( self, paddr:int ) -> int:
        self._check(paddr)
        return self._mem[paddr]


    def write_byte( self, paddr:int, value:int ) -> None:
        self._check(paddr)
        if value < 0 or value > 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        self._mem[paddr] = value


    def page_address( self, page:int, offset:int=0 ) -> int:
        """
        Compose (page, offset) into a physical address. The address layout
        would silently drop out-of-range bits, so both halves are checked.
        """
        if page < 0 or page >= mmu.PAGE_COUNT:
            raise OutOfBounds(page, mmu.PAGE_COUNT)
        if offset < 0 or offset >= mmu.PAGE_SIZE:
            raise OutOfBounds(offset, mmu.PAGE_SIZE)
        return mmu.get_address(page, offset)


    def read_page( self, page:int ) -> bytes:
        base = self.page_address(page)
        return bytes(self._mem[base : base + mmu.PAGE_SIZE])


    def zero_page( self, page:int ) -> None:
        base = self.page_address(page)
        self._mem[base : base + mmu.PAGE_SIZE] = bytes(mmu.PAGE_SIZE)
        log.debug(f"zeroed page {page:#04x}")
