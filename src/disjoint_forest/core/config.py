"""Configuration management for disjoint-forest."""

from pathlib import Path
import json

from pydantic import BaseModel, Field


class AnalysisConfig(BaseModel):
    """Configuration for analysis settings."""

    verbose: bool = Field(default=False, description="Enable verbose logging")
    default_analyses: list[str] = Field(
        default_factory=lambda: ["components", "mst"],
        description="Analyses run by 'run' when --analysis is omitted",
    )


class GraphConfig(BaseModel):
    """Configuration for edge-list input."""

    validate_edges: bool = Field(default=True, description="Log warnings for suspicious edges")
    max_rows_displayed: int = Field(default=20, ge=1, description="Rows shown in result tables")


class Config(BaseModel):
    """Main configuration for disjoint-forest tool."""

    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2, default=str)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, searches the
            default locations and falls back to the default config.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "disjoint-forest" / "config.json",
            Path.cwd() / "disjoint-forest.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
