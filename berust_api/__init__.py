"""berust_api - FastAPI service exposing in-memory translation"""
