"""
Shared fixtures for taxonomy loading tests.
"""

import pytest

from product_taxonomy.core import localizations
from product_taxonomy.core.values import load_values
from tests.utils.taxonomy_data import ATTRIBUTES_YAML, VALUES_YAML, load_yaml, write


@pytest.fixture(autouse=True)
def _reset_localizations():
    """Each test starts without a cached localization catalog."""
    localizations.reset()
    yield
    localizations.reset()


@pytest.fixture
def values_index():
    return load_values(load_yaml(VALUES_YAML))


@pytest.fixture
def values_by_friendly_id(values_index):
    return values_index.hashed_by("friendly_id")


@pytest.fixture
def data_dir(tmp_path):
    """A complete data folder with values, attributes and French localizations."""
    root = tmp_path / "data"
    write(root / "values.yml", VALUES_YAML)
    write(root / "attributes.yml", ATTRIBUTES_YAML)
    write(
        root / "localizations" / "attributes" / "fr.yml",
        """
        fr:
          attributes:
            color:
              name: Couleur
              description: Définit la couleur principale
        """,
    )
    write(
        root / "localizations" / "values" / "fr.yml",
        """
        fr:
          values:
            color__black:
              name: Noir
        """,
    )
    return root
