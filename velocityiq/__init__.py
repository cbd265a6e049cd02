"""VelocityIQ - technical-debt risk scoring for engineering teams."""

__version__ = "0.1.0"
