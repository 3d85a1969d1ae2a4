"""
Venue recommendation engine.

Responsibilities:
- Accept structured user preferences and an optional user profile.
- Score every venue with deterministic additive heuristics.
- Return the ranked venues together with short match explanations.
- Serve the parsed catalogue to callers from a process-wide cache.
"""
