# (C) 2024 Irreducible Inc.

import os

import pytest
from hypothesis import settings

# `fast` keeps the default run short; HYPOTHESIS_PROFILE=slow explores properties more thoroughly.
settings.register_profile("fast", max_examples=25, deadline=None)
settings.register_profile("slow", max_examples=1000, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "fast"))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "slow: property tests over many examples; deselect with -m 'not slow'")
