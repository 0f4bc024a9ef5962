"""InternLink FastAPI backend."""
