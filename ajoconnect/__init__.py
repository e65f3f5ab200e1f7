"""AjoConnect notification backend package."""
