"""Gamification bounded context: points, levels and badges."""
