"""Static lookup tables shared across the resume builder."""
