"""mega — HTTP service skeleton configured from the environment."""

__version__ = "0.1.0"
