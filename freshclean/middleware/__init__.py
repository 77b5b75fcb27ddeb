"""Middleware package"""
from .request_id import RequestIdMiddleware

__all__ = ['RequestIdMiddleware']
