"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
import math

# Internal deps
from . import log
from .address import AddressLayout
from .errors import OutOfBounds, UnknownProcess, UnmappedPage


"""
Pages are 256 bytes and there are 64 of them.
"""
PAGE_SIZE = 256
PAGE_COUNT = 64
MEM_SIZE = 16384
assert PAGE_COUNT * PAGE_SIZE == MEM_SIZE, "MEM_SIZE must equal PAGE_SIZE * PAGE_COUNT"
log.debug(f"{PAGE_SIZE=} {PAGE_COUNT=} {MEM_SIZE=}")


"""
Number of bits required to index each byte in a page.
"""
PAGE_SHIFT = int(math.log2(PAGE_SIZE))
assert 1 << PAGE_SHIFT == PAGE_SIZE
log.debug(f"{PAGE_SHIFT=}")


"""
Page 0 holds the allocation bitmap followed by the process directory.
"""
BITMAP_BASE = 0
DIRECTORY_BASE = PAGE_COUNT
log.debug(f"{BITMAP_BASE=} {DIRECTORY_BASE=}")


"""
Virtual addresses are 16-bit: an 8-bit virtual page over an 8-bit offset.
Physical addresses only need enough page bits to cover PAGE_COUNT.
"""
virtual = AddressLayout("vaddr", 16)
virtual.field(15, PAGE_SHIFT, "page")
virtual.field(PAGE_SHIFT - 1, 0, "offset")
VADDR_LIMIT = virtual.limit

physical = AddressLayout("paddr", int(math.log2(MEM_SIZE)))
physical.field(physical.bits - 1, PAGE_SHIFT, "page")
physical.field(PAGE_SHIFT - 1, 0, "offset")


def split_vaddr( vaddr:int ):
    """
    Return (virtual_page, offset).
    """
    fields = virtual.split(vaddr)
    return fields["page"], fields["offset"]


def get_address( page:int, offset:int ) -> int:
    return physical.compose(page=page, offset=offset)


class Translator:
    """
    Class resolving (process, virtual address) pairs to physical addresses
    through the page tables held in physical memory. Read-only.
    """
    def __init__( self, tables ):
        self.tables = tables


    def translate( self, pid:int, vaddr:int ) -> int:
        if vaddr < 0 or vaddr >= VADDR_LIMIT:
            raise OutOfBounds(vaddr, VADDR_LIMIT)
        vpage, offset = split_vaddr(vaddr)

        table_page = self.tables.get_table_page(pid)
        if table_page == 0:
            raise UnknownProcess(pid)

        """
        Only the first PAGE_COUNT slots of a table are ever written, anything
        past them reads as unmapped.
        """
        if vpage >= PAGE_COUNT:
            raise UnmappedPage(pid, vaddr, vpage)
        ppage = self.tables.get_table_entry(table_page, vpage)
        if ppage == 0:
            raise UnmappedPage(pid, vaddr, vpage)

        paddr = get_address(ppage, offset)
        log.debug(f"translate proc {pid}: {vaddr:#06x} -> vpage {vpage:#04x} -> ppage {ppage:#04x} -> {paddr:#06x}")
        return paddr
