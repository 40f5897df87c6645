"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

"""
Memory geometry, address layouts and the address translator.
"""
from . import mmu

"""
Simulated RAM holding the bitmap, the process directory and every page.
"""
from .memory import PhysicalMemory

"""
Physical page allocation and the per-process page tables.
"""
from .allocator import PageAllocator
from .table import PageTableManager

"""
Process creation and termination, and the facade wiring it all together.
"""
from .process import ProcessManager
from .simulator import Simulator

"""
Ownership map of physical memory built on an interval tree.
"""
from .mmap import MemoryMap, PageConflict, Region

from .errors import (
    Exhausted,
    OutOfBounds,
    OutOfMemory,
    ProcessExists,
    PtsimError,
    UnknownProcess,
    UnmappedPage,
)

__all__ = [
    "Exhausted",
    "MemoryMap",
    "OutOfBounds",
    "OutOfMemory",
    "PageAllocator",
    "PageConflict",
    "PageTableManager",
    "PhysicalMemory",
    "ProcessExists",
    "ProcessManager",
    "PtsimError",
    "Region",
    "Simulator",
    "UnknownProcess",
    "UnmappedPage",
]
