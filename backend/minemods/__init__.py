"""MineMods catalog backend."""
