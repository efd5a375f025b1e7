"""Calculation engine: pure functions over plan value objects."""
