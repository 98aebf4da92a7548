from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

pytest.importorskip("scipy")


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so that statistical tests are reproducible."""
    return np.random.default_rng(20251019)
