"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
from typing import List, Tuple

# Internal deps
from . import log
from . import mmu
from .memory import PhysicalMemory


def _check_slot( what:str, idx:int ) -> None:
    if idx < 0 or idx >= mmu.PAGE_COUNT:
        raise ValueError(f"{what} {idx} outside 0..{mmu.PAGE_COUNT - 1}")


class PageTableManager:
    """
    Class managing the process directory and the page tables.

    The directory is the byte range [PAGE_COUNT, 2 * PAGE_COUNT) of page 0:
    byte PAGE_COUNT + pid holds the physical page of that process's table, or
    0 if it has none. A table is one physical page whose byte vpage holds the
    physical page mapped at vpage, or 0 if unmapped.
    """
    def __init__( self, memory:PhysicalMemory ):
        self.memory = memory


    def get_table_page( self, pid:int ) -> int:
        _check_slot("process", pid)
        return self.memory.read_byte(mmu.DIRECTORY_BASE + pid)


    def set_directory_entry( self, pid:int, table_page:int ) -> None:
        _check_slot("process", pid)
        self.memory.write_byte(mmu.DIRECTORY_BASE + pid, table_page)
        log.debug(f"directory[{pid}] = {table_page:#04x}")


    def clear_directory_entry( self, pid:int ) -> None:
        self.set_directory_entry(pid, 0)


    def set_table_entry( self, table_page:int, vpage:int, ppage:int ) -> None:
        _check_slot("virtual page", vpage)
        self.memory.write_byte(self.memory.page_address(table_page, vpage), ppage)
        log.debug(f"table {table_page:#04x}[{vpage:#04x}] = {ppage:#04x}")


    def get_table_entry( self, table_page:int, vpage:int ) -> int:
        _check_slot("virtual page", vpage)
        return self.memory.read_byte(self.memory.page_address(table_page, vpage))


    def entries( self, table_page:int ) -> List[Tuple[int, int]]:
        """
        Mapped (vpage, ppage) pairs of a table in ascending vpage order.
        """
        pairs = []
        for vpage in range(mmu.PAGE_COUNT):
            ppage = self.get_table_entry(table_page, vpage)
            if ppage != 0:
                pairs.append((vpage, ppage))
        return pairs


    def live_processes( self ) -> List[Tuple[int, int]]:
        """
        (pid, table_page) for every process with a directory entry.
        """
        live = []
        for pid in range(mmu.PAGE_COUNT):
            table_page = self.get_table_page(pid)
            if table_page != 0:
                live.append((pid, table_page))
        return live
