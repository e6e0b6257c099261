"""配置模块"""
from .config import ENGINE_CONFIG, BATCH_CONFIG, LOGGING_CONFIG, validate_config

__all__ = ['ENGINE_CONFIG', 'BATCH_CONFIG', 'LOGGING_CONFIG', 'validate_config']
