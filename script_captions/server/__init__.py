"""HTTP API for the caption pipeline (FastAPI)."""
