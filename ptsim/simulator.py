"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
from typing import List, Tuple

# Internal deps
from . import log
from .allocator import PageAllocator
from .errors import UnknownProcess
from .memory import PhysicalMemory
from .mmu import Translator
from .process import ProcessManager
from .table import PageTableManager


class Simulator:
    """
    Class bundling one physical memory with the components that operate on
    it. This is the API the command line and the printers consume. Separate
    instances share nothing.
    """
    def __init__( self ):
        self.memory = PhysicalMemory()
        self.allocator = PageAllocator(self.memory)
        self.tables = PageTableManager(self.memory)
        self.translator = Translator(self.tables)
        self.processes = ProcessManager(self.allocator, self.tables)
        self.initialize()


    def initialize( self ) -> None:
        self.memory.initialize()


    def allocate_page( self ) -> int:
        return self.allocator.allocate_page()


    def free_page( self, page:int ) -> None:
        self.allocator.free_page(page)


    def create_process( self, pid:int, page_count:int ) -> None:
        self.processes.create_process(pid, page_count)


    def terminate_process( self, pid:int ) -> None:
        self.processes.terminate_process(pid)


    def translate( self, pid:int, vaddr:int ) -> int:
        return self.translator.translate(pid, vaddr)


    def read_byte( self, paddr:int ) -> int:
        return self.memory.read_byte(paddr)


    def write_byte( self, paddr:int, value:int ) -> None:
        self.memory.write_byte(paddr, value)


    def load_byte( self, pid:int, vaddr:int ) -> Tuple[int, int]:
        """
        Read one byte through pid's page table. Returns (paddr, value).
        """
        paddr = self.translate(pid, vaddr)
        value = self.read_byte(paddr)
        log.debug(f"load proc {pid}: [{paddr:#06x}] -> {value}")
        return paddr, value


    def store_byte( self, pid:int, vaddr:int, value:int ) -> int:
        """
        Write one byte through pid's page table. Returns paddr.
        """
        paddr = self.translate(pid, vaddr)
        self.write_byte(paddr, value)
        log.debug(f"store proc {pid}: [{paddr:#06x}] <- {value}")
        return paddr


    def bitmap_snapshot( self ) -> List[bool]:
        return self.allocator.bitmap_snapshot()


    def table_entries( self, pid:int ) -> List[Tuple[int, int]]:
        table_page = self.tables.get_table_page(pid)
        if table_page == 0:
            raise UnknownProcess(pid)
        return self.tables.entries(table_page)
