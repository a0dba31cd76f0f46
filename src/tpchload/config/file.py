import importlib.resources as pkg_resources
import logging
import os
import pathlib
import yaml
from typing import Any, Dict, Optional

import tpchload.config as tpchload_config
from tpchload.config.strings import DEFAULT_HADOOP_HOME, HADOOP_HOME_ENV
from tpchload.errors import InvalidConfigFile

logger = logging.getLogger(__name__)


class ConfigFile:
    """
    Deployment-specific settings. The packaged defaults are always loaded;
    values in a user-provided file take precedence over them.
    """

    @classmethod
    def load(cls, file_path: Optional[str | pathlib.Path] = None) -> "ConfigFile":
        merged = cls._load_defaults()
        if file_path is not None:
            try:
                with open(file_path, "r", encoding="UTF-8") as file:
                    user_config = yaml.load(file, Loader=yaml.Loader)
            except (OSError, yaml.YAMLError) as ex:
                raise InvalidConfigFile(
                    "Failed to read the configuration file '{}': {}".format(
                        file_path, ex
                    )
                ) from ex
            # An empty file parses to `None`.
            if user_config is not None:
                if not isinstance(user_config, dict):
                    raise InvalidConfigFile(
                        "The configuration file '{}' must contain a "
                        "mapping of settings".format(file_path)
                    )
                merged.update(user_config)
        return cls(merged)

    @classmethod
    def load_only_defaults(cls) -> "ConfigFile":
        return cls(cls._load_defaults())

    @staticmethod
    def _load_defaults() -> Dict[str, Any]:
        with pkg_resources.files(tpchload_config).joinpath("defaults.yml").open(
            "r"
        ) as data:
            return yaml.load(data, Loader=yaml.Loader)

    def __init__(self, raw_parsed: Dict[str, Any]):
        self._raw = raw_parsed

    @property
    def hadoop_home(self) -> str:
        """
        The configured value wins, then $HADOOP_HOME. If neither is set we
        fall back to /usr so that /usr/bin/hadoop is used.
        """
        if self._raw.get("hadoop_home") is not None:
            return str(self._raw["hadoop_home"])
        from_env = os.environ.get(HADOOP_HOME_ENV)
        if from_env:
            return from_env
        logger.warning("WARN: $%s is not defined", HADOOP_HOME_ENV)
        logger.warning(
            "Using: $%s = %s so that %s/bin/hadoop will be used",
            HADOOP_HOME_ENV,
            DEFAULT_HADOOP_HOME,
            DEFAULT_HADOOP_HOME,
        )
        return DEFAULT_HADOOP_HOME

    @property
    def generator_archive(self) -> pathlib.Path:
        return pathlib.Path(self._raw["generator_archive"])

    @property
    def generator_command(self) -> str:
        return self._raw["generator_command"]

    @property
    def launcher_name(self) -> str:
        return self._raw["launcher_name"]

    @property
    def launcher_log_name(self) -> str:
        return self._raw["launcher_log_name"]

    @property
    def properties_name(self) -> str:
        return self._raw["properties_name"]

    @property
    def log_file(self) -> Optional[pathlib.Path]:
        if "log_file" not in self._raw or self._raw["log_file"] is None:
            return None
        return pathlib.Path(self._raw["log_file"])
