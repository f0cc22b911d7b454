"""Settings-panel controller for an IDE rich presence plugin."""
