"""Shared fixtures for the GenVault tests."""

from unittest.mock import MagicMock

import pytest

from genvault.api_client import RemoteVaultAPI
from genvault.models import VaultEntry
from genvault.view_model import VaultViewModel


def make_entry(entry_id, site_name, link="", password="secret"):
    return VaultEntry(id=entry_id, site_name=site_name, link=link, password=password)


@pytest.fixture
def sample_entries():
    return [
        make_entry("1", "GitHub", "https://github.com", "gh-pass"),
        make_entry("2", "gitlab", "https://gitlab.com", "gl-pass"),
        make_entry("3", "Bank", "https://bank.example", "bank-pass"),
    ]


@pytest.fixture
def mock_api(sample_entries):
    """A mocked RemoteVaultAPI that succeeds by default."""
    api = MagicMock(spec=RemoteVaultAPI)
    api.fetch_entries.return_value = list(sample_entries)
    api.save_entry.return_value = None
    api.generate_password.return_value = "aB3$xYz9!q"
    return api


@pytest.fixture
def view_model(mock_api):
    return VaultViewModel(mock_api)
