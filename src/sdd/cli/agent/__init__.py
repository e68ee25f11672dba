"""Agent definition commands."""
