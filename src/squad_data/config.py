"""
Configuration loader for Squad Data

Handles loading and parsing of YAML/JSON configuration files for:
- The spreadsheet id and the names of its three source tabs
- Fetch URL template, timeouts and concurrency
- HTTP server binding, route and cache headers
"""

import json
import yaml
import os
import logging
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

GVIZ_CSV_URL_TEMPLATE = (
    "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={sheet_name}"
)

SHEET_ID_ENV_VAR = "SHEET_ID"


@dataclass
class SheetNamesConfig:
    """Tab names of the three source tables"""
    players: str = "players"
    matches: str = "matches"
    player_stats: str = "player_stats"


@dataclass
class FetchConfig:
    """Configuration for fetching raw CSV text"""
    url_template: str = GVIZ_CSV_URL_TEMPLATE  # file:// templates read local files
    timeout_seconds: int = 10
    connect_timeout_seconds: int = 5
    max_concurrent_requests: int = 3
    user_agent: str = "Squad-Data/1.0"


@dataclass
class ServerConfig:
    """Configuration for the HTTP data endpoint"""
    host: str = "0.0.0.0"
    port: int = 8080
    route: str = "/api/data"
    cache_control: str = "public, max-age=60, stale-while-revalidate=300"


@dataclass
class SquadDataConfig:
    """Main configuration class for Squad Data"""
    sheet_id: Optional[str] = None

    sheets: SheetNamesConfig = field(default_factory=SheetNamesConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def load_from_file(cls, config_path: str) -> 'SquadDataConfig':
        """Load configuration from YAML or JSON file"""
        path = Path(config_path)

        if not path.exists():
            logger.warning(f"Config file {config_path} not found, using defaults")
            return cls().apply_env()

        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() in ['.yaml', '.yml']:
                config_data = yaml.safe_load(f)
            else:
                config_data = json.load(f)

        return cls.from_dict(config_data or {}).apply_env()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SquadDataConfig':
        """Create configuration from dictionary"""
        sheets_config = SheetNamesConfig(**config_dict.get('sheets', {}))
        fetch_config = FetchConfig(**config_dict.get('fetch', {}))
        server_config = ServerConfig(**config_dict.get('server', {}))

        main_config = {k: v for k, v in config_dict.items()
                       if k not in ['sheets', 'fetch', 'server']}
        main_config.update({
            'sheets': sheets_config,
            'fetch': fetch_config,
            'server': server_config
        })

        return cls(**main_config)

    def apply_env(self) -> 'SquadDataConfig':
        """Let the SHEET_ID environment variable override the file value"""
        sheet_id = os.getenv(SHEET_ID_ENV_VAR, "").strip()
        if sheet_id:
            self.sheet_id = sheet_id
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: str = "config/squad_data.yaml") -> SquadDataConfig:
    """Load Squad Data configuration from file or use defaults"""
    try:
        return SquadDataConfig.load_from_file(config_path)
    except Exception as e:
        logger.error(f"Failed to load config from {config_path}: {e}")
        logger.info("Using default configuration")
        return SquadDataConfig().apply_env()


def create_sample_config(output_path: str = "config/squad_data.yaml"):
    """Create a sample configuration file"""
    config_dict = SquadDataConfig(sheet_id="your-google-sheet-id").to_dict()

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Sample configuration created at {output_path}")
