"""OpenLRAE - open source license risk analysis engine."""

__version__ = "0.4.0"
