"""
Coaching guidance shown next to the ranked picks.

Responsibilities:
- Derive daily and remaining calorie/protein budgets.
- Alcohol, sides/dessert, pre/post-meal and damage-control advice.
- Build the one-line summary that gets copied or saved as a favorite.
"""
