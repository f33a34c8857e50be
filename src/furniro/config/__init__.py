"""Environment-driven settings; see ``furniro.config.settings``."""
