"""Application layer: ports, budget state and use cases."""
