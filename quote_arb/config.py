"""
Configuration loading and validation for the router quote arbitrage checker.

The config is read once at startup and passed explicitly to the runner.
All validation happens here, before any RPC call is attempted.
"""

import os
from typing import Any, Dict, List, Optional

import yaml
from web3 import Web3

from .exceptions import ConfigError
from .types import Token, TokenPath, Venue
from .units import to_raw
from .utils import get_logger

logger = get_logger(__name__)

# Environment variable that overrides rpc_url
RPC_URL_ENV = "RPC_URL"


class ArbConfig:
    """
    Parsed and validated configuration.

    Attributes:
        rpc_url: HTTP(S) RPC endpoint
        venues: Exactly two router venues to compare
        input_token: Token sold into the routers (path[0])
        output_token: Token quoted back (path[-1])
        trade_size: Quantity of input token hypothetically traded
        min_profit: Minimum profit (output token units) to report an opportunity
        gas_cost: Fixed transaction cost in output token units
        quote_amount: Input amount (in input token units) used for the quote
        rpc_timeout_sec: Timeout applied to every RPC request
        poll_sec: Seconds between cycles when not running once
        once: If True, run a single cycle and exit
        concurrent: If True, query both venues concurrently
    """

    def __init__(self, config_dict: Dict[str, Any]):
        """
        Parse and validate config from dictionary.

        Args:
            config_dict: Loaded YAML config

        Raises:
            ConfigError: If required fields missing or invalid
        """
        # RPC and loop settings
        self.rpc_url: str = self._get_required(config_dict, "rpc_url", str)
        if not self.rpc_url.startswith(("http://", "https://")):
            raise ConfigError(f"Invalid RPC URL format: {self.rpc_url}")

        self.rpc_timeout_sec: float = self._get_number(
            config_dict, "rpc_timeout_sec", 10.0
        )
        if self.rpc_timeout_sec <= 0:
            raise ConfigError("rpc_timeout_sec must be positive")

        self.poll_sec: float = self._get_number(config_dict, "poll_sec", 12.0)
        self.once: bool = self._get_bool(config_dict, "once", True)
        self.concurrent: bool = self._get_bool(config_dict, "concurrent", True)

        # Venues and tokens
        self.venues: List[Venue] = self._parse_venues(config_dict.get("venues"))

        tokens_raw = config_dict.get("tokens")
        if not isinstance(tokens_raw, dict):
            raise ConfigError("Missing required config field: tokens")
        self.input_token: Token = self._parse_token(tokens_raw, "input")
        self.output_token: Token = self._parse_token(tokens_raw, "output")

        # Trading parameters
        self.trade_size: float = self._get_number(config_dict, "trade_size")
        self.min_profit: float = self._get_number(config_dict, "min_profit")
        self.gas_cost: float = self._get_number(config_dict, "gas_cost")
        self.quote_amount: float = self._get_number(config_dict, "quote_amount", 1.0)
        if self.quote_amount <= 0:
            raise ConfigError("quote_amount must be positive")
        if to_raw(self.quote_amount, self.input_token.decimals) == 0:
            raise ConfigError(
                f"quote_amount {self.quote_amount} is below one smallest unit of "
                f"{self.input_token.symbol} ({self.input_token.decimals} decimals)"
            )

        if self.trade_size < 0:
            logger.warning(f"trade_size is negative ({self.trade_size})")
        if self.gas_cost < 0:
            logger.warning(f"gas_cost is negative ({self.gas_cost})")

    @staticmethod
    def _get_required(d: Dict, key: str, expected_type: type) -> Any:
        """Get required config field with type validation."""
        if key not in d:
            raise ConfigError(f"Missing required config field: {key}")
        val = d[key]
        if not isinstance(val, expected_type):
            raise ConfigError(
                f"Config field '{key}' must be {expected_type.__name__}, got {type(val).__name__}"
            )
        return val

    @staticmethod
    def _get_number(d: Dict, key: str, default: Optional[float] = None) -> float:
        """Get a numeric field as float; required when no default is given."""
        if key not in d or d[key] is None:
            if default is None:
                raise ConfigError(f"Missing required config field: {key}")
            return float(default)
        val = d[key]
        if isinstance(val, bool):
            raise ConfigError(f"Config field '{key}' must be a number, got bool")
        try:
            return float(val)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Config field '{key}' must be a number: {val!r}") from e

    @staticmethod
    def _get_bool(d: Dict, key: str, default: bool) -> bool:
        """Get an optional boolean flag; strings like "false" are rejected."""
        if key not in d or d[key] is None:
            return default
        val = d[key]
        if not isinstance(val, bool):
            raise ConfigError(
                f"Config field '{key}' must be bool, got {type(val).__name__}"
            )
        return val

    @staticmethod
    def _parse_address(value: Any, where: str) -> str:
        """Validate an address string and return it checksummed."""
        if not isinstance(value, str) or not Web3.is_address(value):
            raise ConfigError(f"{where} is not a valid address: {value!r}")
        digits = value[2:] if value[:2] in ("0x", "0X") else value
        mixed_case = digits != digits.lower() and digits != digits.upper()
        if mixed_case and not Web3.is_checksum_address(value):
            raise ConfigError(f"{where} has an invalid EIP-55 checksum: {value!r}")
        return Web3.to_checksum_address(value)

    @classmethod
    def _parse_venues(cls, venues_raw: Any) -> List[Venue]:
        """Parse and validate the two router venues."""
        if venues_raw is None:
            raise ConfigError("Missing required config field: venues")
        if not isinstance(venues_raw, list):
            raise ConfigError("venues must be a list")
        if len(venues_raw) != 2:
            raise ConfigError(f"Exactly 2 venues required, got {len(venues_raw)}")

        venues = []
        for i, venue in enumerate(venues_raw):
            if not isinstance(venue, dict):
                raise ConfigError(f"Venue config {i} must be a dict")

            name = venue.get("name")
            if not name:
                raise ConfigError(f"Venue config {i} missing 'name'")
            if "router" not in venue:
                raise ConfigError(f"Venue '{name}' missing 'router'")

            router = cls._parse_address(venue["router"], f"Venue '{name}' router")
            venues.append(Venue(name=str(name), router=router))

        if venues[0].router == venues[1].router:
            raise ConfigError("Both venues point at the same router address")

        return venues

    @classmethod
    def _parse_token(cls, tokens_raw: Dict[str, Any], role: str) -> Token:
        """Parse and validate one of the input/output tokens."""
        info = tokens_raw.get(role)
        if not isinstance(info, dict):
            raise ConfigError(f"Token '{role}' config must be a dict")
        if "address" not in info:
            raise ConfigError(f"Token '{role}' missing 'address'")
        if "decimals" not in info:
            raise ConfigError(f"Token '{role}' missing 'decimals'")

        decimals = info["decimals"]
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ConfigError(
                f"Token '{role}' decimals must be a non-negative integer: {decimals!r}"
            )

        return Token(
            symbol=str(info.get("symbol", role.upper())),
            address=cls._parse_address(info["address"], f"Token '{role}' address"),
            decimals=decimals,
        )

    @property
    def path(self) -> TokenPath:
        """Swap path priced at both venues: input token -> output token."""
        return (self.input_token.address, self.output_token.address)


def load_config(config_path: str, env: Optional[Dict[str, str]] = None) -> ArbConfig:
    """
    Load and validate config from YAML file.

    Args:
        config_path: Path to config YAML file
        env: Environment mapping checked for RPC_URL (defaults to os.environ)

    Returns:
        Validated ArbConfig instance

    Raises:
        ConfigError: If config invalid, unparsable or file not found
    """
    if not os.path.exists(config_path):
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    if not isinstance(config_dict, dict):
        raise ConfigError("Config file must contain a YAML dictionary")

    env = os.environ if env is None else env
    rpc_override = env.get(RPC_URL_ENV)
    if rpc_override:
        logger.debug(f"Using {RPC_URL_ENV} from environment")
        config_dict = dict(config_dict, rpc_url=rpc_override)

    return ArbConfig(config_dict)
