from pathlib import Path

import tomllib
import yaml


class ScoringConfig:
    # 36-item version with the remunerated work items (Do52, st_s36)
    INCLUDE_WORK_ITEMS = False

    ID_COLUMN = "id"

    OUTPUT_DIR = Path("runs/scores")
    LOG_DIR = Path("runs/logs")

    # Class methods to load config files
    @classmethod
    def load_config(cls, config_file: Path | str) -> dict:
        """
        Read the [scoring] table (TOML) or `scoring` mapping (YAML) of a config
        file. Unknown keys are returned unchanged.
        """
        config_file = Path(config_file)
        if config_file.suffix in (".yaml", ".yml"):
            with open(config_file, "r", encoding="utf-8") as file:
                config = yaml.safe_load(file) or {}
        else:
            with open(config_file, "rb") as file:
                config = tomllib.load(file)
        return config.get("scoring", {})

    @classmethod
    def include_work_items(cls, config: dict | None = None) -> bool:
        return bool((config or {}).get("include_work_items", cls.INCLUDE_WORK_ITEMS))
