import pytest

from fitroutine.catalog import ExerciseCatalog, default_catalog
from fitroutine.progress import ProgressStore


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def tiny_catalog():
    """Catalog with magnitudes already at their floors."""
    return ExerciseCatalog.from_dict({
        'beginner': {
            'lose_weight': [
                'Jump squats 1x1',
                'Squats 2x1',
                'Plank 1x10s',
                'Walk 5 min',
                'Stretching 5 min',
            ],
        },
    })


@pytest.fixture
def store(tmp_path):
    return ProgressStore(tmp_path / "progress.json")
