"""Core item classification, ordering and low-stock evaluation."""
