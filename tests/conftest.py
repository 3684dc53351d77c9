import io

import pytest

from asciigraph import ChartEngine, Dataset, GraphConfig

ENV_KEYS = [
    "ASCIIGRAPH_MAX_WIDTH",
    "ASCIIGRAPH_MAX_HEIGHT",
    "ASCIIGRAPH_PLOT_SYMBOL",
    "ASCIIGRAPH_Y_RANGE",
    "ASCIIGRAPH_LOG_LEVEL",
    "ASCIIGRAPH_ENABLE_COLOUR",
]

FRUIT = [("apples", 5.0), ("oranges", 3.0), ("bananas", 8.0), ("grapes", 2.0)]

LOTS_OF_FRUIT_NAMES = ["apples", "oranges", "bananas", "grapes"] * 3


@pytest.fixture
def fruit_dataset():
    """The four fruit scenario used throughout the rendering tests."""
    return Dataset.from_pairs(FRUIT)


@pytest.fixture
def lots_of_fruit():
    """Twelve columns valued 0..11, too wide for one 50 column page."""
    return Dataset.from_columns(LOTS_OF_FRUIT_NAMES, range(12), title="Lots of Fruit")


@pytest.fixture
def tall_config():
    return GraphConfig().with_max_height(11)


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def engine(sink):
    return ChartEngine(out=sink)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the real environment and any .env file."""
    for key in ENV_KEYS:
        # setenv first so the teardown also removes values load_dotenv sets
        monkeypatch.setenv(key, "unset")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
