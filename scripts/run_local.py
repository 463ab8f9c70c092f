"""
Local development server.

Usage:
    python -m scripts.run_local
"""
import sys
from pathlib import Path

import uvicorn

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.config.settings import get_settings


if __name__ == "__main__":
    settings = get_settings()
    print(f"Server listening on http://localhost:{settings.api_port}")
    print(f"Test with: http://localhost:{settings.api_port}/languages?{settings.grant_query_param}=en.json")
    uvicorn.run(
        "src.api.main:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
