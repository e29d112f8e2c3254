"""Grid construction helpers."""
