"""Shared fixtures for encoder tests."""
from __future__ import annotations

import pytest

from bounds import TINY
from converter import BinaryEncoder
from contract import EncoderSpec, build_spec


@pytest.fixture
def tiny_encoder() -> BinaryEncoder:
    return BinaryEncoder(TINY)


@pytest.fixture
def tiny_spec() -> EncoderSpec:
    return build_spec(TINY)
