"""Shared test fixtures."""

from __future__ import annotations

import pytest

from hashavatar.engine.config import IdenticonConfig
from hashavatar.identity.name import Name

XML_HEADER = '<?xml version="1.0" encoding="utf-8"?>'

# Hashes with known sampling patterns
MIXED_HASH = "aabbccddeeff001122334455"
LOW_HASH = "111122223333444455556666"
HIGH_HASH = "999988887777666655554444"
ALL_ON_HASH = "f" * 64
ALL_OFF_HASH = "0" * 64

VARIATION_HASHES = [MIXED_HASH, LOW_HASH, HIGH_HASH]

TEST_NAME = "Test Name"
TEST_EMAIL = "test@example.com"
# md5("test@example.com")
TEST_EMAIL_HASH = "55502f40dc8b7c769880b10874abc9d0"


@pytest.fixture
def test_name() -> Name:
    return Name(TEST_NAME)


@pytest.fixture
def mixed_name() -> Name:
    return Name.with_hash(TEST_NAME, MIXED_HASH)


@pytest.fixture
def default_config() -> IdenticonConfig:
    return IdenticonConfig()
