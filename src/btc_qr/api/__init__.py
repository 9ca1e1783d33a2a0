"""HTTP API — FastAPI application exposing the payload encoders."""
