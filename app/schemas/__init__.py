"""Pydantic schemas package.

Folder intent:
  common.py     — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  company.py    — company payload and responses
  request.py    — request submission bodies and request / acceptance responses
  statement.py  — statement upload body and response
  user.py       — user response
"""
