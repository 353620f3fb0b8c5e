"""HTTP boundary for the certification registry (FastAPI)."""
