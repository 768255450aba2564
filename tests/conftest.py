"""tests/conftest.py – shared fixtures for all tests."""
import pytest
from unittest.mock import AsyncMock, MagicMock

from hackapi.core.catalog import ItemStore
from hackapi.core.ollama import OllamaError, OllamaService
from hackapi.models import Item


def make_item(**kw) -> Item:
    defaults = dict(
        store_name="I Want Cake Store", store_address_url="https://maps.example/cake",
        food_name="Red Velvet", qty=10, original_price_php=1400, discounted_price_php=900,
        surprise_group=None,
    )
    defaults.update(kw)
    return Item(**defaults)


@pytest.fixture
def sample_items() -> list[Item]:
    return [
        make_item(food_name="Red Velvet", original_price_php=1400, discounted_price_php=900),
        make_item(food_name="Mango Bravo", original_price_php=500, discounted_price_php=200),
        make_item(store_name="Pan de Manila", store_address_url="", food_name="Pandesal Box",
                  qty=3, original_price_php=120, discounted_price_php=60, surprise_group="bread"),
    ]


@pytest.fixture
def item_store(tmp_path) -> ItemStore:
    return ItemStore(data_dir=tmp_path)


@pytest.fixture
def online_ollama() -> OllamaService:
    """OllamaService stand-in that is connected; set `.generate.side_effect` per test."""
    m = MagicMock(spec=OllamaService)
    m.default_model = "llama3.2:3b"
    m.is_connected = AsyncMock(return_value=True)
    m.status = AsyncMock(return_value={"status": "connected", "models": [{"name": "llama3.2:3b"}]})
    m.list_models = AsyncMock(return_value=[{"name": "llama3.2:3b"}])
    m.generate = AsyncMock(return_value="Front: 🐕 Iro | Back: Dog - A friendly pet!")
    return m


@pytest.fixture
def offline_ollama() -> OllamaService:
    m = MagicMock(spec=OllamaService)
    m.default_model = "llama3.2:3b"
    m.is_connected = AsyncMock(return_value=False)
    m.status = AsyncMock(return_value={"status": "disconnected", "models": []})
    m.list_models = AsyncMock(side_effect=OllamaError("Failed to connect to Ollama service (ConnectError)"))
    m.generate = AsyncMock(side_effect=OllamaError("Failed to connect to Ollama service (ConnectError)"))
    return m
