"""Logging, settings and path helpers shared by all layers."""
