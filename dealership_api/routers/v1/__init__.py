"""v1 router package — all /api/v1/* endpoints live here.

Files:
  resources.py  — build_router(resource): the CRUD routes every resource shares

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to dealership_api/services/.
"""
