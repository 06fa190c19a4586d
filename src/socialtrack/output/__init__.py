"""Output layer — render ServiceResult for humans, scripts, or JSON."""
