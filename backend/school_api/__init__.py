"""Application package for the school records backend.

This package exposes the models, repositories, services and routers used
by the FastAPI application in `school_api.main`.
"""
