#!/usr/bin/env python3
"""
Message Board API - Development Runner
Run the FastAPI application with auto-reload for development.
"""

import sys
from pathlib import Path

# Add the src directory to Python path
src_dir = Path(__file__).parent / "api" / "src"
sys.path.insert(0, str(src_dir))

# Load environment variables from .env-dev file
from dotenv import load_dotenv

env_file = Path(__file__).parent / ".env-dev"
if env_file.exists():
    load_dotenv(env_file)
    print(f"Loaded environment from {env_file}")

import uvicorn

if __name__ == "__main__":
    print("Starting Message Board API in development mode...")
    uvicorn.run(
        "message_board.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=[str(src_dir)]
    )
