"""Application layer: error taxonomy consumed by the response layer."""
