import pytest

from ptsim import args
from ptsim.simulator import Simulator


@pytest.fixture(autouse=True)
def _reset_args():
    """Command-line flags are module state; keep tests from leaking them."""
    args.reset()
    yield
    args.reset()


@pytest.fixture
def sim() -> Simulator:
    return Simulator()
