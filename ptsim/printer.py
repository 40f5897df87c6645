"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Human-readable views of simulator state. Every function returns a string and
leaves printing to the caller.
"""

# Standard Python deps
from typing import Iterable, List, Tuple

# Internal deps
from .mmap import Region


_newline = "\n"
_row = 16


def free_map( bitmap:List[bool] ) -> str:
    """
    Generate the page free map, one character per physical page.

    args
    ====

        bitmap
                    allocation flags indexed by physical page number
    """
    cells = "".join("#" if used else "." for used in bitmap)
    rows = [cells[i:i + _row] for i in range(0, len(cells), _row)]
    return f"""--- PAGE FREE MAP ---
{_newline.join(rows)}
"""


def page_table( pid:int, entries:Iterable[Tuple[int, int]] ) -> str:
    """
    Generate the virtual to physical page listing of one process.

    args
    ====

        pid
                    process number

        entries
                    mapped (vpage, ppage) pairs
    """
    string = f"--- PROCESS {pid} PAGE TABLE ---\n"
    for vpage, ppage in entries:
        string += f"{vpage:02x} -> {ppage:02x}\n"
    return string


def load( pid:int, vaddr:int, paddr:int, value:int ) -> str:
    return f"Load proc {pid}: {vaddr} => {paddr}, value={value}"


def store( pid:int, vaddr:int, paddr:int, value:int ) -> str:
    return f"Store proc {pid}: {vaddr} => {paddr}, value={value}"


def memory_map( regions:Iterable[Region] ) -> str:
    """
    Generate the physical memory map, one line per owned range.
    """
    string = "--- PHYSICAL MEMORY MAP ---\n"
    for r in regions:
        string += "0x{:04x}-0x{:04x} {}\n".format(r.addr, r.addr + r.length - 1, r.describe())
    return string
