"""Core normalization engine, key transformation, configuration and errors."""
