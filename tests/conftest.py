import numpy as np
import pytest

from foreparzen import Domain


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def unit_domain():
    return Domain.real(0.0, 1.0)


@pytest.fixture
def int_domain():
    return Domain.integer(-100, 100)
