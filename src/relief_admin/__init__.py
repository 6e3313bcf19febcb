"""Admin back office for a disaster-relief coordination platform."""
