"""EduLog - personal learning tracker client."""
