"""
Recommendation engine.

Responsibilities:
- Pick candidate dishes from a pasted menu or a cuisine template.
- Score every candidate against the remaining budget and preferences.
- Rank, keep the top three, and annotate each with a script and badges.
- Return structured recommendations ready for API serialisation.
"""
