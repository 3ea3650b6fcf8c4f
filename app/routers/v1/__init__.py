"""v1 router package — all /api/v1/* endpoints live here.

Files:
  deps.py        — shared dependencies (caller identity header)
  companies.py   — company registration / update / lookup
  requests.py    — division & auditor requests, listing, accept / reject
  statements.py  — financial & audit statement uploads and listings
  users.py       — user lookup

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
