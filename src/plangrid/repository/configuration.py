# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from plangrid import configuration
from plangrid.layout.normalize import normalize_options
from plangrid.model.layout_options import LayoutOptions
from plangrid.template.layout_options import get_layout_options_template


def get_configuration_template() -> configuration.Configuration:
    return {
        "show_header": True,
        "show_weekends": True,
        "data_path": None,
        "container_width": None,
        "layout": get_layout_options_template(),
    }


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError(
                f"empty configuration file {configuration.APP_CONFIG_PATH}"
            )

        # Migration: back-fill settings added after the file was written
        template = get_configuration_template()
        for key, value in template.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
        layout_template = get_layout_options_template()
        for key, value in layout_template.items():
            if key not in self._config["layout"]:
                self._config["layout"][key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_layout_options(self) -> LayoutOptions:
        return normalize_options(self.config["layout"])

    def update_config(
        self,
        show_header: Optional[bool] = None,
        show_weekends: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        container_width: Optional[int] = None,
        remove_container_width: bool = False,
        max_columns: Optional[int] = None,
        day_start_hour: Optional[int] = None,
        day_end_hour: Optional[int] = None,
        hour_height: Optional[float] = None,
        min_height: Optional[float] = None,
        min_width_percent: Optional[float] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if show_weekends is not None:
            self.config["show_weekends"] = show_weekends
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if container_width is not None:
            self.config["container_width"] = container_width
        if remove_container_width:
            self.config["container_width"] = None
        if max_columns is not None:
            self.config["layout"]["max_columns"] = max_columns
        if day_start_hour is not None:
            self.config["layout"]["day_start_hour"] = day_start_hour
        if day_end_hour is not None:
            self.config["layout"]["day_end_hour"] = day_end_hour
        if hour_height is not None:
            self.config["layout"]["hour_height"] = hour_height
        if min_height is not None:
            self.config["layout"]["min_height"] = min_height
        if min_width_percent is not None:
            self.config["layout"]["min_width_percent"] = min_width_percent


CONFIGURATION_REPO = ConfigurationRepository()
