from datetime import datetime
from itertools import count

import pytest

from multigateway.payments.sinks import MemorySink


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def reference_generator():
    """Gera 0000000100000000..., 0000000200000000..., um por chamada."""
    counter = count(1)
    return lambda: f"{next(counter):08x}" + "f" * 24


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 5, 14, 30, 0)
