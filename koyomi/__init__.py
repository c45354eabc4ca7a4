"""Japanese holiday month calendar."""
