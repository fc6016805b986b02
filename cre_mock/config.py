"""Configuration management for cre-mock."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from cre_mock.exceptions import ConfigurationError

DEFAULT_OPENAPI_PATH = Path(__file__).parent / "api" / "openapi.yaml"


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @property
    def base_url(self) -> str:
        """Get the URL the server is reachable on from this machine."""
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}"


@dataclass
class GenerationConfig:
    """Sizes of the synthetic dataset built on every (re)generation."""

    num_properties: int = 200
    num_parties: int = 400
    num_brokers: int = 100
    num_transactions: int = 1000

    def validate(self) -> None:
        """Check that every collection can be populated.

        Raises
        ------
        ConfigurationError
            If a count is not positive or fewer than two parties are
            requested (buyer and seller must differ).
        """
        for name in ("num_properties", "num_parties", "num_brokers", "num_transactions"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")
        if self.num_parties < 2:
            raise ConfigurationError("num_parties must be at least 2 so buyer and seller differ")


@dataclass
class DocsConfig:
    """API documentation configuration."""

    spec_path: Path = field(default_factory=lambda: DEFAULT_OPENAPI_PATH)
    title: str = "CRE Mock API"


@dataclass
class CreMockConfig:
    """Main configuration for cre-mock."""

    server: ServerConfig = field(default_factory=ServerConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    docs: DocsConfig = field(default_factory=DocsConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "CreMockConfig":
        """Create config from environment variables."""
        server = ServerConfig(
            host=os.getenv("CRE_HOST", "0.0.0.0"),
            port=_int_env("CRE_PORT", 3001),
        )

        generation = GenerationConfig(
            num_properties=_int_env("CRE_NUM_PROPERTIES", 200),
            num_parties=_int_env("CRE_NUM_PARTIES", 400),
            num_brokers=_int_env("CRE_NUM_BROKERS", 100),
            num_transactions=_int_env("CRE_NUM_TRANSACTIONS", 1000),
        )
        generation.validate()

        spec_path = os.getenv("CRE_OPENAPI_PATH")
        docs = DocsConfig(spec_path=Path(spec_path)) if spec_path else DocsConfig()

        return cls(
            server=server,
            generation=generation,
            docs=docs,
            seed=_int_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: int | None) -> int | None:
    """Read an integer environment variable."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
