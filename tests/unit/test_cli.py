"""Tests for the quote-arb command line entry point."""

from unittest.mock import patch

import pytest
import yaml

from quote_arb import cli
from quote_arb.exceptions import ProtocolError, RpcError


@pytest.fixture(autouse=True)
def quiet_environment(monkeypatch):
    """Keep the CLI away from the real logging setup, .env files and RPC_URL."""
    monkeypatch.delenv("RPC_URL", raising=False)
    with patch("quote_arb.cli.logging_config.setup"), patch("quote_arb.cli.load_dotenv"):
        yield


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "rpc_url": "https://polygon-rpc.com",
                "venues": [
                    {"name": "QuickSwap", "router": "0x" + "1" * 40},
                    {"name": "SushiSwap", "router": "0x" + "2" * 40},
                ],
                "tokens": {
                    "input": {"address": "0x" + "0" * 39 + "1", "decimals": 18},
                    "output": {"address": "0x" + "0" * 39 + "2", "decimals": 6},
                },
                "trade_size": 1.0,
                "min_profit": 5.0,
                "gas_cost": 0.5,
                "once": False,
            }
        )
    )
    return str(path)


def test_missing_config_exits_with_config_error(tmp_path, capsys):
    code = cli.main(["--config", str(tmp_path / "nope.yaml")])

    assert code == cli.EXIT_CONFIG
    assert "Config error" in capsys.readouterr().err


def test_malformed_address_fails_before_connecting(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "rpc_url": "https://polygon-rpc.com",
                "venues": [
                    {"name": "QuickSwap", "router": "not-an-address"},
                    {"name": "SushiSwap", "router": "0x" + "2" * 40},
                ],
            }
        )
    )

    with patch("quote_arb.cli.QuoteArbRunner") as runner_cls:
        code = cli.main(["--config", str(path)])

    assert code == cli.EXIT_CONFIG
    runner_cls.assert_not_called()


def test_flags_override_config(config_path):
    with patch("quote_arb.cli.QuoteArbRunner") as runner_cls:
        code = cli.main(["--config", config_path, "--once", "--sequential", "--json"])

    assert code == cli.EXIT_OK
    config = runner_cls.call_args.args[0]
    assert config.once is True
    assert config.concurrent is False
    assert runner_cls.call_args.kwargs == {"json_output": True}
    runner_cls.return_value.connect.assert_called_once()
    runner_cls.return_value.run.assert_called_once()


@pytest.mark.parametrize(
    "error", [RpcError("connection refused"), ProtocolError("short response")]
)
def test_rpc_failures_exit_with_rpc_code(config_path, error, capsys):
    with patch("quote_arb.cli.QuoteArbRunner") as runner_cls:
        runner_cls.return_value.run.side_effect = error
        code = cli.main(["--config", config_path, "--once"])

    assert code == cli.EXIT_RPC
    assert type(error).__name__ in capsys.readouterr().err


def test_keyboard_interrupt_is_clean_exit(config_path):
    with patch("quote_arb.cli.QuoteArbRunner") as runner_cls:
        runner_cls.return_value.run.side_effect = KeyboardInterrupt
        code = cli.main(["--config", config_path, "--loop"])

    assert code == cli.EXIT_OK


def test_once_and_loop_are_exclusive(config_path):
    with pytest.raises(SystemExit):
        cli.parse_args(["--config", config_path, "--once", "--loop"])
