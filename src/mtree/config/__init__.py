from .config import Config, ConfigError, Mode

__all__ = ['Config', 'ConfigError', 'Mode']
