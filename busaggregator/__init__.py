"""Bus route aggregator service."""
