"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Command dispatcher. The whole command line is parsed before anything runs, so
a typo in the last command does not leave half a simulation behind.
"""

# Standard Python deps
import errno
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

# Internal deps
from . import args
from . import log
from . import printer
from .errors import PtsimError
from .mmap import MemoryMap
from .simulator import Simulator


def _np( sim:Simulator, pid:int, count:int ) -> None:
    sim.create_process(pid, count)

def _pfm( sim:Simulator ) -> None:
    print(printer.free_map(sim.bitmap_snapshot()), end="")

def _ppt( sim:Simulator, pid:int ) -> None:
    print(printer.page_table(pid, sim.table_entries(pid)), end="")

def _kp( sim:Simulator, pid:int ) -> None:
    sim.terminate_process(pid)

def _lb( sim:Simulator, pid:int, vaddr:int ) -> None:
    paddr, value = sim.load_byte(pid, vaddr)
    print(printer.load(pid, vaddr, paddr, value))

def _sb( sim:Simulator, pid:int, vaddr:int, value:int ) -> None:
    paddr = sim.store_byte(pid, vaddr, value)
    print(printer.store(pid, vaddr, paddr, value))

def _pmap( sim:Simulator ) -> None:
    print(printer.memory_map(MemoryMap.build(sim).regions()), end="")


"""
Command name -> (number of integer arguments, handler).
"""
_commands = {
    "np":   (2, _np),
    "pfm":  (0, _pfm),
    "ppt":  (1, _ppt),
    "kp":   (1, _kp),
    "lb":   (2, _lb),
    "sb":   (3, _sb),
    "pmap": (0, _pmap),
}


@dataclass
class Command:
    """
    Class representing one parsed command.
    """
    pos: int                # index of the command name in the word list
    name: str
    operands: List[int]
    handler: Callable

    def __str__( self ) -> str:
        return " ".join([self.name] + [str(v) for v in self.operands])


def parse( words:List[str] ) -> List[Command]:
    """
    Turn the word list into commands, force-exiting on the first bad word.
    """
    line = " ".join(words)

    def abort_bad_command( msg:str, pos:int ) -> None:
        """
        Pretty-print an error message and force-exit the script.
        """
        column = len(" ".join(words[:pos])) + (1 if pos else 0)
        word = words[pos] if pos < len(words) else " "
        log.error(f"bad command {msg}: {word.strip()}")
        log.error(f"    {line}")
        log.error(f"    {' ' * column}{'^' * len(word)}")
        sys.exit(errno.EINVAL)

    parsed = []
    pos = 0
    while pos < len(words):
        name = words[pos]
        if not name in _commands:
            abort_bad_command("name", pos)
        (argc, handler) = _commands[name]

        operands = []
        for i in range(pos + 1, pos + 1 + argc):
            if i >= len(words):
                abort_bad_command(f"{name}: missing argument", i)
            try:
                word = words[i]
                operands.append(int(word, base=(16 if word.startswith("0x") else 10)))
            except ValueError:
                abort_bad_command(f"{name}: argument", i)

        parsed.append(Command(pos, name, operands, handler))
        log.debug(f"parsed {parsed[-1]}")
        pos = pos + 1 + argc

    return parsed


def execute( sim:Simulator, commands:List[Command] ) -> int:
    """
    Run commands in order. A failing command is reported and skipped.
    Returns 0 if every command succeeded, EINVAL otherwise.
    """
    status = 0
    for cmd in commands:
        log.verbose(f"running {cmd}")
        try:
            cmd.handler(sim, *cmd.operands)
        except (PtsimError, ValueError) as e:
            log.error(f"{cmd}: {e}")
            status = errno.EINVAL
    return status


def main( argv:Optional[List[str]]=None ) -> int:
    words = args.parse(argv)
    if not words:
        print("usage: ptsim commands", file=sys.stderr)
        return 1

    commands = parse(words)
    sim = Simulator()
    return execute(sim, commands)


def run() -> None:
    sys.exit(main())
