"""
Lambda handlers package for AWS Lambda functions.
"""
from .calendar import handler

__all__ = ["handler"]
