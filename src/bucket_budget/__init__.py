"""Bucket budget: income distribution, monthly goals and weekly tracking."""
