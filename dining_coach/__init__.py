"""
Fine Dining Coach.

Ranks restaurant dishes against a remaining calorie and protein budget
using fixed heuristics, and writes the ordering script to read to the
waiter.
"""
