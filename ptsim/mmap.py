"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Physical memory map: who owns which byte range of simulated RAM, derived from
the bitmap, the directory and the page tables.
"""

# Standard Python deps
from dataclasses import dataclass
from typing import List, Optional

# Internal deps
from . import log
from . import mmu
from .errors import PtsimError

# External deps
from intervaltree import IntervalTree


@dataclass
class Region:
    """
    Class representing a single region in the physical memory map.
    """
    label: str              # bitmap, directory, reserved, table, data, orphan
    addr: int               # base physical address
    length: int             # length in bytes
    pid: Optional[int] = None       # owning process, if any
    vpage: Optional[int] = None     # virtual page a data page is mapped at

    @property
    def page( self ) -> int:
        return self.addr >> mmu.PAGE_SHIFT

    def describe( self ) -> str:
        if self.label == "table":
            return f"process {self.pid} page table"
        if self.label == "data":
            return f"process {self.pid} vpage {self.vpage:#04x}"
        return self.label


@dataclass
class PageConflict(PtsimError):
    """
    Two owners claim the same physical bytes.
    """
    region: Region
    existing: List[Region]

    def __str__( self ) -> str:
        others = ", ".join(r.describe() for r in self.existing)
        return f"page {self.region.page:#04x} ({self.region.describe()}) already owned by {others}"


class MemoryMap():
    """
    Class representing the ownership of the whole of physical memory.
    This is a wrapper around chaimleib's intervaltree library.
    """

    def __init__( self ):
        self._ivtree = IntervalTree()


    def add( self, region:Region ) -> None:
        """
        Add a region, refusing any overlap with regions already present.
        """
        overlap = sorted(self._ivtree[region.addr:region.addr + region.length])
        if overlap:
            raise PageConflict(region, [iv.data for iv in overlap])
        self._ivtree.addi(region.addr, region.addr + region.length, region)
        log.debug(f"added {region}")


    @classmethod
    def build( cls, sim ) -> "MemoryMap":
        """
        Walk the directory and every live page table of sim.
        """
        mm = cls()

        """
        Page 0 is split between the bitmap, the directory and unused bytes.
        """
        mm.add(Region("bitmap", mmu.BITMAP_BASE, mmu.PAGE_COUNT))
        mm.add(Region("directory", mmu.DIRECTORY_BASE, mmu.PAGE_COUNT))
        mm.add(Region("reserved", mmu.DIRECTORY_BASE + mmu.PAGE_COUNT,
                      mmu.PAGE_SIZE - 2 * mmu.PAGE_COUNT))

        for pid, table_page in sim.tables.live_processes():
            mm.add(Region("table", mmu.get_address(table_page, 0), mmu.PAGE_SIZE, pid=pid))
            for vpage, ppage in sim.tables.entries(table_page):
                mm.add(Region("data", mmu.get_address(ppage, 0), mmu.PAGE_SIZE, pid=pid, vpage=vpage))

        """
        Pages marked in use that no table reaches, e.g. left over from a
        process creation that ran out of memory.
        """
        for page, used in enumerate(sim.bitmap_snapshot()):
            addr = mmu.get_address(page, 0)
            if used and not mm._ivtree[addr]:
                log.verbose(f"page {page:#04x} allocated but unreachable")
                mm.add(Region("orphan", addr, mmu.PAGE_SIZE))

        return mm


    def regions( self ) -> List[Region]:
        """
        Return list of Region objects sorted by ascending base address.
        """
        return list(map(lambda r: r[2], sorted(self._ivtree)))


    def region_at( self, paddr:int ) -> Optional[Region]:
        hits = self._ivtree[paddr]
        if not hits:
            return None
        return next(iter(hits)).data
