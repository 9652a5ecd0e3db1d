__version__ = "0.1.0"

from toggle_demo.config import AppConfig, load_app_config  # noqa: E402
from toggle_demo.state import PluginState  # noqa: E402

__all__ = [
    "AppConfig",
    "PluginState",
    "__version__",
    "load_app_config",
]
