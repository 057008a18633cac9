"""Configuration management for hub3-codec."""

from dataclasses import dataclass, field

from hub3_codec.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class CodecConfig:
    """Payload codec configuration.

    ``currency`` and ``model_prefix`` are written verbatim into the payload,
    so the defaults should only change together with the scanners that read it.
    """

    currency: str = "EUR"
    model_prefix: str = "HR"
    validate_purpose_code: bool = True
    enforce_reference_policy: bool = False

    def __post_init__(self) -> None:
        if len(self.currency) != 3 or not (self.currency.isascii() and self.currency.isupper()):
            raise ConfigurationError(
                f"Currency must be a three-letter uppercase ISO code, got {self.currency!r}"
            )
        if len(self.model_prefix) != 2 or not (
            self.model_prefix.isascii() and self.model_prefix.isupper()
        ):
            raise ConfigurationError(
                f"Payment model prefix must be two uppercase letters, got {self.model_prefix!r}"
            )


@dataclass
class Hub3Config:
    """Main configuration for hub3-codec."""

    codec: CodecConfig = field(default_factory=CodecConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "Hub3Config":
        """Create config from environment variables."""
        import os

        codec = CodecConfig(
            currency=os.getenv("HUB3_CURRENCY", "EUR"),
            model_prefix=os.getenv("HUB3_MODEL_PREFIX", "HR"),
            validate_purpose_code=_env_flag("HUB3_VALIDATE_PURPOSE_CODE", True),
            enforce_reference_policy=_env_flag("HUB3_ENFORCE_REFERENCE_POLICY", False),
        )

        seed = os.getenv("SEED")
        try:
            parsed_seed = int(seed) if seed else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed!r}") from e

        return cls(
            codec=codec,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=parsed_seed,
        )


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable."""
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")
