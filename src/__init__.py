"""
Tarayath Advisor - Purchase Decision Service

A FastAPI-based microservice that evaluates planned purchases against
a user's finances and savings plans, and keeps a history of the verdicts.
"""

__version__ = "0.1.0"
