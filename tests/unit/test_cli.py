from __future__ import annotations

import pytest
from typer.testing import CliRunner

from stockroom import config
from stockroom.main import app
from stockroom.utils.logging import configure_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def seed_only(monkeypatch):
    """Run every command against the fixed seed."""
    monkeypatch.setenv("BACKEND_ENABLED", "false")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("COLUMNS", "200")
    config.get_settings.cache_clear()
    yield
    configure_logging(level="INFO")
    config.get_settings.cache_clear()


def test_info_reports_backend_state():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "backend=not configured" in result.output


def test_collections_lists_filters():
    result = runner.invoke(app, ["collections"])
    assert result.exit_code == 0
    assert "inventory: filters[category, stock, supplier]" in result.output
    assert "stock_outs:" in result.output


def test_list_inventory_with_filter_and_sort():
    result = runner.invoke(app, ["list", "inventory", "--filter", "stock=low-stock", "--sort", "quantity"])
    assert result.exit_code == 0
    assert "Printer Paper" in result.output
    assert "Wireless Keyboard" not in result.output
    assert "3 of 3 matching (6 total)" in result.output


def test_list_with_query_and_limit():
    result = runner.invoke(app, ["list", "movements", "-q", "keyboard", "--limit", "1"])
    assert result.exit_code == 0
    assert "1 of 3 matching" in result.output


def test_list_stock_outs_shows_unknown_for_dangling_customer():
    result = runner.invoke(app, ["list", "stock_outs", "--sort", "date"])
    assert result.exit_code == 0
    assert "John Smith" in result.output
    assert "Unknown" in result.output


def test_list_unknown_collection_fails():
    result = runner.invoke(app, ["list", "widgets"])
    assert result.exit_code == 1
    assert "Unknown collection 'widgets'" in result.output


def test_list_invalid_filter_value_fails():
    result = runner.invoke(app, ["list", "inventory", "--filter", "stock=plenty"])
    assert result.exit_code == 1
    assert "Invalid value 'plenty'" in result.output


def test_list_malformed_filter_is_a_usage_error():
    result = runner.invoke(app, ["list", "inventory", "--filter", "stock"])
    assert result.exit_code == 2


def test_stats_renders_dashboard():
    result = runner.invoke(app, ["stats"])
    assert result.exit_code == 0
    assert "Inventory Overview" in result.output
    assert "224" in result.output
    assert "Top Selling Products" in result.output


def test_history_and_customer_commands():
    history = runner.invoke(app, ["history", "item-1"])
    customer = runner.invoke(app, ["customer", "cust-1"])
    missing = runner.invoke(app, ["customer", "cust-404"])

    assert history.exit_code == 0
    assert "Movements of Wireless Keyboard" in history.output
    assert customer.exit_code == 0
    assert "10006" in customer.output
    assert missing.exit_code == 1
