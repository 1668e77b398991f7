"""
Menu understanding layer.

Responsibilities:
- Turn pasted menu text into structured Dish records (keyword matching).
- Hold the static macro tables and scoring weights.
- Estimate a min/max macro range for a Dish.
"""
