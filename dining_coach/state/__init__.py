"""
Persisted user state.

Responsibilities:
- Define the single user State record and its defaults.
- Load it from local storage, falling back to defaults on any bad read.
- Save it verbatim and maintain the favorites and recents lists.
"""
