"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Errors raised by the simulator core. The dispatcher in `cli` is the only place
they are caught; everything else lets them propagate.
"""

# Standard Python deps
from dataclasses import dataclass


class PtsimError(Exception):
    pass


@dataclass
class Exhausted(PtsimError):
    """
    No free physical page left in the bitmap.
    """
    page_count: int

    def __str__( self ) -> str:
        return f"all {self.page_count} physical pages are allocated"


@dataclass
class OutOfMemory(PtsimError):
    """
    Process creation ran out of pages. `allocated` pages were taken before the
    failure and are still marked in use.
    """
    pid: int
    requested: int
    allocated: int

    def __str__( self ) -> str:
        return (f"process {self.pid}: out of memory after {self.allocated} of "
                f"{self.requested} pages")


@dataclass
class UnknownProcess(PtsimError):
    pid: int

    def __str__( self ) -> str:
        return f"process {self.pid} has no page table"


@dataclass
class UnmappedPage(PtsimError):
    pid: int
    vaddr: int
    vpage: int

    def __str__( self ) -> str:
        return f"process {self.pid}: virtual page {self.vpage:#04x} of {self.vaddr:#06x} is not mapped"


@dataclass
class OutOfBounds(PtsimError):
    addr: int
    limit: int

    def __str__( self ) -> str:
        return f"address {self.addr:#x} outside [0, {self.limit:#x})"


@dataclass
class ProcessExists(PtsimError):
    pid: int
    table_page: int

    def __str__( self ) -> str:
        return f"process {self.pid} already has page table {self.table_page:#04x}"
