from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from rlmdp_core.config import configure, reset_settings
from rlmdp_core.markov.configuration import reset_process_register

pytest.importorskip("scipy")

TEST_SEED = 20240611


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, Any, None]:
    reset_settings()
    reset_process_register()
    configure(seed=TEST_SEED)
    yield
    reset_settings()
    reset_process_register()
