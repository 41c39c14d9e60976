"""Controllers for Rally Pairing."""
