"""
Development server.

Reads ``.env`` and serves ``cadence.main:app`` with auto-reload.

Usage:
    python scripts/run_dev.py [port]
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from cadence.core.config import settings

if __name__ == "__main__":
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8000
    print(f"{settings.PROJECT_NAME} {settings.VERSION}")
    print(f"  API:  http://localhost:{port}/api/v1")
    print(f"  Docs: http://localhost:{port}/docs")
    print(f"  DB:   {settings.DATABASE_HOST}:{settings.DATABASE_PORT}/{settings.DATABASE_DBNAME}")

    uvicorn.run("cadence.main:app", host="0.0.0.0", port=port, reload=True,
                log_level="debug" if settings.DEBUG else "info")
