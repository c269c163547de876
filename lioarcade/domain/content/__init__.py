"""Content bounded context (read-only from the scoring engine's side)."""
