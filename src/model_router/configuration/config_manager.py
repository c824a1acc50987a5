import json
import os
from pathlib import Path

from model_router.routing.router_config import RouterConfig

CONFIG_PATH_ENV = "MODEL_ROUTER_CONFIG"


class ConfigManager:

    def __init__(self, config_path=None):
        self._config_path = self._resolve_config_path(config_path)
        self._config_data = None
        self._router_config = None

    def _resolve_config_path(self, config_path=None):
        if config_path:
            return Path(config_path)
        if os.environ.get(CONFIG_PATH_ENV):
            return Path(os.environ[CONFIG_PATH_ENV])
        package_dir = Path(__file__).resolve().parent.parent
        return package_dir / "data" / "router_config.json"

    @property
    def config_path(self):
        return self._config_path

    def load_config_data(self):
        if self._config_data is None:
            if not self._config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self._config_path}")

            with open(self._config_path, 'r', encoding='utf-8') as f:
                self._config_data = json.load(f)

        return self._config_data

    def get_router_config(self) -> RouterConfig:
        if self._router_config is None:
            config_data = self.load_config_data()
            defaults = RouterConfig()

            # Keys left out of the file keep their built-in defaults
            self._router_config = defaults.with_changes(
                default_model_by_task=config_data.get('default_model_by_task', {}),
                fallback_chain=config_data.get('fallback_chain', defaults.fallback_chain),
                routing_strategy=config_data.get('routing_strategy', defaults.routing_strategy),
            )

        return self._router_config

    def save_router_config(self, router_config: RouterConfig):
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._config_path, 'w', encoding='utf-8') as f:
            json.dump(router_config.to_dict(), f, indent=2)
        self._config_data = router_config.to_dict()
        self._router_config = router_config
