"""Configuration package - JSON backed simulation settings"""
from .unified_config import UnifiedConfig, ConfigurationError

__all__ = ['UnifiedConfig', 'ConfigurationError']
