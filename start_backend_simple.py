#!/usr/bin/env python3
"""
Development launcher for the Wedding Planner API.

Runs app.main:app under uvicorn with auto-reload. Set PORT to change the
listening port (default 8000) and RELOAD=0 to disable reloading.
"""

import uvicorn
import os
import sys

if __name__ == "__main__":
    project_root = os.path.dirname(os.path.abspath(__file__))
    os.chdir(project_root)
    sys.path.insert(0, project_root)

    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "1") != "0"

    print(f"💍 Wedding Planner API on http://localhost:{port} (docs at /docs)")

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=port,
        reload=reload,
        reload_dirs=["./app"] if reload else None,
    )
