"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
from typing import List

# Internal deps
from . import log
from . import mmu
from .allocator import PageAllocator
from .errors import Exhausted, OutOfMemory, ProcessExists, UnknownProcess
from .table import PageTableManager


class ProcessManager:
    """
    Class creating and killing processes.

    A live process owns exactly one table page plus every data page listed in
    that table. Both are created together and freed together.
    """
    def __init__( self, allocator:PageAllocator, tables:PageTableManager ):
        self.allocator = allocator
        self.tables = tables


    def create_process( self, pid:int, page_count:int ) -> None:
        """
        Allocate a page table and page_count data pages mapped at virtual
        pages 0..page_count-1.

        There is no rollback: if memory runs out part way, the pages already
        taken stay allocated and mapped, and OutOfMemory reports how many.
        """
        existing = self.tables.get_table_page(pid)
        if existing != 0:
            raise ProcessExists(pid, existing)
        if page_count < 0 or page_count > mmu.PAGE_COUNT:
            raise ValueError(f"page count {page_count} outside 0..{mmu.PAGE_COUNT}")

        try:
            table_page = self.allocator.allocate_page()
        except Exhausted as e:
            raise OutOfMemory(pid, page_count, 0) from e

        """
        The page may have been a data page of a dead process, so it has to be
        cleared before any of its bytes are read as mappings.
        """
        self.allocator.memory.zero_page(table_page)
        self.tables.set_directory_entry(pid, table_page)

        for vpage in range(page_count):
            try:
                ppage = self.allocator.allocate_page()
            except Exhausted as e:
                log.verbose(f"process {pid}: left with {vpage} of {page_count} pages")
                raise OutOfMemory(pid, page_count, vpage) from e
            self.tables.set_table_entry(table_page, vpage, ppage)

        log.verbose(f"created process {pid}: table {table_page:#04x}, {page_count} pages")


    def terminate_process( self, pid:int ) -> None:
        """
        Free every mapped page, then the table page, then forget the process.
        """
        table_page = self.tables.get_table_page(pid)
        if table_page == 0:
            raise UnknownProcess(pid)

        for vpage, ppage in self.tables.entries(table_page):
            self.allocator.free_page(ppage)
        self.allocator.free_page(table_page)
        self.tables.clear_directory_entry(pid)
        log.verbose(f"terminated process {pid}")


    def owned_pages( self, pid:int ) -> List[int]:
        """
        Table page first, then data pages in virtual page order.
        """
        table_page = self.tables.get_table_page(pid)
        if table_page == 0:
            raise UnknownProcess(pid)
        return [table_page] + [ppage for _, ppage in self.tables.entries(table_page)]
