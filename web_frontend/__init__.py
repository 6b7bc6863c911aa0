"""HDBSCAN Params web frontend."""
