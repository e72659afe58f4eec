"""Configuration for the engine and the desktop simulator."""

from .settings import EngineSettings, Settings, SimulatorSettings, get_settings

__all__ = ["EngineSettings", "Settings", "SimulatorSettings", "get_settings"]
