"""Shared fixtures for the lookup tests."""

import pytest

from tests.label_stubs import ADVIL_LABEL, StubLabelClient


@pytest.fixture
def advil_label():
    return dict(ADVIL_LABEL)


@pytest.fixture
def stub_client():
    return StubLabelClient()
