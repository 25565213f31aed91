"""Training progress: session completion tracking."""
