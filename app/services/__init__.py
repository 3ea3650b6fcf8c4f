"""Services package — all business logic lives here, never in routers.

Files:
  access.py      — AccessGuard: resolve caller, exact role check, company ownership
  company.py     — company registration (with its executive), update, lookup
  requests.py    — request submission and the waiting/accepted/rejected lifecycle
  statements.py  — financial / audit statement uploads and listings
  users.py       — user lookup (lets a pending user see its promotion)

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
