"""Sources for the latest published and the last tested Vivaldi versions."""
