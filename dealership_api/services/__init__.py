"""Services package — all business logic lives here, never in routers.

Files:
  resource.py  — ResourceService, the CRUD façade shared by every resource

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
