from .config import SinkConfig, load_sink_config

__all__ = [
    "SinkConfig",
    "load_sink_config",
]
