"""Randomized, parallel search for Fourtiles games."""
