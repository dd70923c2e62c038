"""Tests for ID generation."""

import pytest
from ulid import ULID

from gridforge.core.id import Prefix, new_project_id, new_widget_id


@pytest.mark.unit
class TestGeneration:
    """Prefixed ULIDs."""

    def test_unique(self):
        assert new_widget_id() != new_widget_id()

    def test_prefixes(self):
        assert new_widget_id().startswith(f"{Prefix.WIDGET}_")
        assert new_project_id().startswith(f"{Prefix.PROJECT}_")

    def test_suffix_is_ulid(self):
        suffix = new_project_id().split("_", 1)[1]
        assert str(ULID.from_str(suffix)) == suffix
