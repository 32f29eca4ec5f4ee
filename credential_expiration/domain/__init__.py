"""Domain layer - Profiles, classification rules and alert decisions."""
