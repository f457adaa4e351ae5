"""End-to-end tests of the CLI against a temporary data directory."""

import re

import pytest
from click.testing import CliRunner

from ordering.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, list(args), env={"ORDERING_DATA_DIR": str(tmp_path)})

    return _run


def _add_burger(run) -> str:
    result = run("product", "add", "--name", "Burger", "--price", "20",
                 "--category", "sandwich", "--description", "Big burger")
    assert result.exit_code == 0, result.output
    return re.search(r"Product (\w+) 'Burger' added at \$20\.00", result.output).group(1)


def _create_order(run, product_id: str) -> str:
    result = run("order", "create", "--user", "user-1", "--items", f"{product_id}:1")
    assert result.exit_code == 0, result.output
    return re.search(r"Order (\w+)  \(status=Created\)", result.output).group(1)


class TestProductCommands:

    def test_add_and_list(self, run):
        _add_burger(run)
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Burger" in result.output
        assert "Sandwich" in result.output

    def test_add_invalid_price_shows_notification(self, run):
        result = run("product", "add", "--name", "Free", "--price", "0", "--category", "SIDE")
        assert result.exit_code != 0
        assert "Product price must be greater than zero" in result.output

    def test_show_missing(self, run):
        result = run("product", "show", "--id", "nope")
        assert result.exit_code != 0
        assert "The product does not exist" in result.output


class TestOrderCommands:

    def test_create_order(self, run):
        product_id = _add_burger(run)
        result = run("order", "create", "--user", "user-1", "--items", f"{product_id}:1")
        assert result.exit_code == 0, result.output
        assert "$20.00" in result.output

    def test_create_with_unknown_product(self, run):
        result = run("order", "create", "--user", "user-1", "--items", "nope:1")
        assert result.exit_code != 0
        assert "Invalid product(s)." in result.output

    def test_bad_items_format(self, run):
        result = run("order", "create", "--user", "user-1", "--items", "nope")
        assert result.exit_code != 0
        assert "Expected 'ProductId:Quantity'" in result.output

    def test_status_flow(self, run):
        order_id = _create_order(run, _add_burger(run))

        result = run("order", "status", "--id", order_id, "--to", "in_preparation")
        assert result.exit_code == 0, result.output
        assert "In preparation" in result.output

        result = run("order", "status", "--id", order_id, "--to", "IN_PREPARATION")
        assert result.exit_code != 0
        assert "Order already has status In preparation" in result.output

        result = run("order", "list", "--status", "in_preparation")
        assert order_id in result.output

    def test_remove(self, run):
        order_id = _create_order(run, _add_burger(run))

        assert run("order", "remove", "--id", order_id).exit_code == 0

        result = run("order", "show", "--id", order_id)
        assert result.exit_code != 0
        assert "Invalid order." in result.output
