"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
from typing import List

# Internal deps
from . import log
from . import mmu
from .errors import Exhausted, OutOfBounds
from .memory import PhysicalMemory


class PageAllocator:
    """
    Class handing out physical pages. The in-use bitmap is the first
    PAGE_COUNT bytes of physical memory, one byte per page: 1 allocated,
    0 free.
    """
    def __init__( self, memory:PhysicalMemory ):
        self.memory = memory


    def _bitmap_addr( self, page:int ) -> int:
        if page < 0 or page >= mmu.PAGE_COUNT:
            raise OutOfBounds(page, mmu.PAGE_COUNT)
        return mmu.BITMAP_BASE + page


    def allocate_page( self ) -> int:
        """
        Claim the lowest-numbered free page.
        """
        for page in range(mmu.PAGE_COUNT):
            addr = self._bitmap_addr(page)
            if self.memory.read_byte(addr) == 0:
                self.memory.write_byte(addr, 1)
                log.debug(f"allocated page {page:#04x}")
                return page
        raise Exhausted(mmu.PAGE_COUNT)


    def free_page( self, page:int ) -> None:
        """
        Mark page free. Freeing a page that is already free does nothing.
        Page 0 holds the bitmap and the directory and can never be freed.
        """
        if page == 0:
            raise ValueError("page 0 is reserved")
        self.memory.write_byte(self._bitmap_addr(page), 0)
        log.debug(f"freed page {page:#04x}")


    def is_allocated( self, page:int ) -> bool:
        return self.memory.read_byte(self._bitmap_addr(page)) != 0


    def free_count( self ) -> int:
        return self.bitmap_snapshot().count(False)


    def bitmap_snapshot( self ) -> List[bool]:
        return [self.is_allocated(page) for page in range(mmu.PAGE_COUNT)]
