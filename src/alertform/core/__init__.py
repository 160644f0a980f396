"""Pure conversion logic for alert rule editing."""
