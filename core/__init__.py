"""Recommendation scoring, preferences and configuration."""
