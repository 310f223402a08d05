"""
Batinet Backend

Content feed for a construction-trades professional network.

Package Structure:
==================
    batinet/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn batinet.api.main:app --reload
"""
