"""Shared dependencies for API routes."""

from fastapi import Request

from services.model_client import ModelClient


def get_model_client(request: Request) -> ModelClient:
    """Return the client built once by the app lifespan."""
    return request.app.state.model_client
