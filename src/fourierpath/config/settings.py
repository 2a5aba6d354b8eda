"""Configuration settings for Fourierpath."""

from pathlib import Path

from pydantic import BaseModel, Field

from fourierpath.domain import coerce_odd


class QuadratureConfig(BaseModel):
    """Configuration for adaptive Gauss-Legendre integration."""

    tolerance: float = Field(
        default=1e-5,
        gt=0.0,
        le=1.0,
        description="Accepted error per interval (refinement stops at 15x this value)",
    )
    max_depth: int = Field(
        default=16,
        ge=0,
        le=32,
        description="Maximum number of bisection levels",
    )


class SeriesConfig(BaseModel):
    """Configuration for Fourier series computation."""

    coefficient_count: int = Field(
        default=11,
        ge=1,
        le=501,
        description="Number of coefficients (even values are rounded up to odd)",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker processes for coefficient computation (None = sequential)",
    )

    def odd_count(self) -> int:
        """Coefficient count rounded up to an odd number."""
        return coerce_odd(self.coefficient_count)


class PreviewConfig(BaseModel):
    """Configuration for curve previews."""

    sample_count: int = Field(
        default=1000,
        ge=1,
        le=100_000,
        description="Number of steps used to trace a curve",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Only errors reach the console",
    )


class FourierPathSettings(BaseModel):
    """Main application settings."""

    quadrature: QuadratureConfig = Field(default_factory=QuadratureConfig)
    series: SeriesConfig = Field(default_factory=SeriesConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FourierPathSettings:
    """Get default application settings."""
    return FourierPathSettings()
