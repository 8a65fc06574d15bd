"""
Shared services used across pipelines
"""
