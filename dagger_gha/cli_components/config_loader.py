import dataclasses
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from dagger_gha.gha import Gha
from dagger_gha.globals.errors import ConfigurationError
from dagger_gha.globals.settings import Settings

SETTINGS_KEYS = frozenset(f.name for f in dataclasses.fields(Settings))
PIPELINE_KEYS = frozenset(
    {
        "name",
        "command",
        "module",
        "runner",
        "secrets",
        "sparse_checkout",
        "lfs",
        "no_dispatch",
        "pull_request_concurrency",
        "timeout_minutes",
        "permissions",
    }
)
TRIGGER_KEYS: Dict[str, frozenset] = {
    "on_push": frozenset({"branches", "tags", "paths"}),
    "on_pull_request": frozenset({"types", "branches", "paths"}),
    "on_issue_comment": frozenset({"types"}),
}


class ConfigLoader(ABC):
    """Interface for turning a declarative pipeline file into a Gha instance."""

    @abstractmethod
    def load(self, file: Path, as_json: Optional[bool] = None) -> Gha:
        """
        Load settings, pipelines and triggers from a file.

        Args:
            file: Path to the declaration file.
            as_json: Force the JSON output setting, or None to keep the file's.

        Returns:
            Gha: The configured generator.

        Raises:
            ConfigurationError: The file is unreadable or malformed.
        """
        pass


class YAMLConfigLoader(ConfigLoader):
    """
    Loads a YAML declaration with PyYAML.

    The file has a `settings` mapping and a `pipelines` list. Each pipeline
    takes the arguments of `Gha.with_pipeline` plus its triggers:
    `on_push`, `on_pull_request`, `on_issue_comment` (mappings) and
    `on_schedule` (a list of cron expressions).
    """

    def load(self, file: Path, as_json: Optional[bool] = None) -> Gha:
        try:
            with open(file, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"cannot read {file}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"error parsing {file}: {e}") from e

        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"{file}: expected a mapping at the top level")
        self._check_keys(content, frozenset({"settings", "pipelines"}), "top-level")

        settings = self._build_settings(content.get("settings") or {})
        if as_json:
            settings.as_json = True
        gha = Gha(settings)

        pipelines = content.get("pipelines") or []
        if not isinstance(pipelines, list):
            raise ConfigurationError("'pipelines' must be a list")
        for entry in pipelines:
            self._add_pipeline(gha, entry)
        return gha

    def _build_settings(self, settings_in: Any) -> Settings:
        if not isinstance(settings_in, dict):
            raise ConfigurationError("'settings' must be a mapping")
        self._check_keys(settings_in, SETTINGS_KEYS, "settings")
        # null keeps the default
        return Settings(**{k: v for k, v in settings_in.items() if v is not None})

    def _add_pipeline(self, gha: Gha, entry: Any) -> None:
        if not isinstance(entry, dict):
            raise ConfigurationError("each pipeline must be a mapping")
        allowed = PIPELINE_KEYS | frozenset(TRIGGER_KEYS) | {"on_schedule"}
        self._check_keys(entry, allowed, "pipeline")
        for required in ("name", "command"):
            if not entry.get(required):
                raise ConfigurationError(f"pipeline is missing '{required}'")

        name = str(entry["name"])
        options = {k: v for k, v in entry.items() if k in PIPELINE_KEYS}
        for list_key in ("secrets", "sparse_checkout"):
            if list_key in options:
                options[list_key] = self._as_list(options[list_key])
        options["name"] = name
        gha.with_pipeline(**options)

        for trigger, keys in TRIGGER_KEYS.items():
            if trigger not in entry:
                continue
            options = entry[trigger] or {}
            if not isinstance(options, dict):
                raise ConfigurationError(f"pipeline '{name}': '{trigger}' must be a mapping")
            self._check_keys(options, keys, f"pipeline '{name}' {trigger}")
            getattr(gha, trigger)(name, **{k: self._as_list(v) for k, v in options.items()})

        if "on_schedule" in entry:
            gha.on_schedule(name, self._as_list(entry["on_schedule"]))

    def _check_keys(self, mapping: Dict[str, Any], allowed: frozenset, where: str) -> None:
        unknown = sorted(str(k) for k in mapping if k not in allowed)
        if unknown:
            raise ConfigurationError(f"unknown {where} key: {', '.join(unknown)}")

    def _as_list(self, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, list):
            return [str(v) for v in value]
        return [str(value)]
