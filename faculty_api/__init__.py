"""Faculty API: teacher records over REST."""
