"""Interface adapters exposed to the outside world."""
