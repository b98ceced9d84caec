"""Partner agent: trust establishment and disclosure matching."""
