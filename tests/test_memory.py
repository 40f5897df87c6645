"""Tests for simulated RAM and the address layouts."""

import pytest

from ptsim import mmu
from ptsim.address import AddressLayout, Bitfield
from ptsim.errors import OutOfBounds
from ptsim.memory import PhysicalMemory


class TestGeometry:
    def test_constants_agree(self) -> None:
        assert mmu.PAGE_COUNT * mmu.PAGE_SIZE == mmu.MEM_SIZE
        assert mmu.PAGE_SHIFT == 8
        assert mmu.DIRECTORY_BASE == 64
        assert mmu.VADDR_LIMIT == 0x10000

    def test_split_vaddr(self) -> None:
        assert mmu.split_vaddr(0x0105) == (1, 5)
        assert mmu.split_vaddr(0xFFFF) == (0xFF, 0xFF)

    def test_get_address(self) -> None:
        assert mmu.get_address(3, 5) == 0x305
        assert mmu.get_address(63, 255) == mmu.MEM_SIZE - 1


class TestBitfield:
    def test_extract(self) -> None:
        assert Bitfield(15, 8).extract(0xABCD) == 0xAB
        assert Bitfield(7, 0).extract(0xABCD) == 0xCD

    def test_insert_drops_bits_that_do_not_fit(self) -> None:
        assert Bitfield(3, 0).insert(0x1F) == 0xF

    def test_layout_compose_and_split(self) -> None:
        layout = AddressLayout("test", 12)
        layout.field(11, 4, "hi")
        layout.field(3, 0, "lo")
        assert layout.compose(hi=0x12, lo=0x3) == 0x123
        assert layout.split(0x123) == {"hi": 0x12, "lo": 0x3}
        assert layout.limit == 0x1000


class TestPhysicalMemory:
    def test_starts_zeroed(self) -> None:
        mem = PhysicalMemory()
        assert mem.size_bytes == mmu.MEM_SIZE
        assert mem.read_byte(0) == 0

    def test_initialize_reserves_page_zero(self) -> None:
        mem = PhysicalMemory()
        mem.initialize()
        assert mem.read_byte(0) == 1

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            PhysicalMemory(1000)

    def test_write_then_read(self) -> None:
        mem = PhysicalMemory()
        mem.write_byte(0x3FFF, 0xAA)
        assert mem.read_byte(0x3FFF) == 0xAA

    @pytest.mark.parametrize("addr", [-1, mmu.MEM_SIZE, 0x10000])
    def test_access_out_of_bounds(self, addr) -> None:
        mem = PhysicalMemory()
        with pytest.raises(OutOfBounds):
            mem.read_byte(addr)
        with pytest.raises(OutOfBounds):
            mem.write_byte(addr, 1)

    @pytest.mark.parametrize("value", [-1, 256])
    def test_byte_value_range(self, value) -> None:
        mem = PhysicalMemory()
        with pytest.raises(ValueError):
            mem.write_byte(0x200, value)

    def test_zero_page_only_touches_that_page(self) -> None:
        mem = PhysicalMemory()
        mem.write_byte(0x1FF, 1)
        mem.write_byte(0x200, 2)
        mem.write_byte(0x2FF, 3)
        mem.write_byte(0x300, 4)
        mem.zero_page(2)
        assert mem.read_page(2) == bytes(mmu.PAGE_SIZE)
        assert mem.read_byte(0x1FF) == 1
        assert mem.read_byte(0x300) == 4

    def test_page_address_checks_both_halves(self) -> None:
        mem = PhysicalMemory()
        with pytest.raises(OutOfBounds):
            mem.page_address(mmu.PAGE_COUNT)
        with pytest.raises(OutOfBounds):
            mem.page_address(1, mmu.PAGE_SIZE)
