"""HTTP entry point (FastAPI app in api.index)."""
