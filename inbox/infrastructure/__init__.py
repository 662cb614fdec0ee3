"""Infrastructure layer: persistence, remote clients and rendering."""
