# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from plangrid.model.layout_options import LayoutOptions

APP_NAME = "plangrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_PLANS_PATH: Path = DATA_PATH / "plans.yaml"


class Configuration(TypedDict):
    show_header: bool
    show_weekends: bool
    data_path: Optional[str]
    container_width: Optional[int]
    layout: LayoutOptions


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any plan
    repository is instantiated without an explicit path.
    """
    global DATA_PATH, DATA_PLANS_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_PLANS_PATH = DATA_PATH / "plans.yaml"
