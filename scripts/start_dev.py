#!/usr/bin/env python3
"""
Development startup script.

Starts the mock bakery API and the ordering front-end in development mode.
"""

import os
import sys
import shutil
import subprocess
import time
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

BAKERY_PORT = int(os.getenv("MOCK_BAKERY_PORT", "8001"))
FRONT_PORT = int(os.getenv("PORT", "8000"))


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import httpx
        import pydantic_settings
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_env():
    """Check if .env file exists."""
    env_file = PROJECT_ROOT / ".env"
    env_example = PROJECT_ROOT / ".env.example"

    if env_file.exists():
        print("✓ Configuration file found")
        return True
    elif env_example.exists():
        print("! Configuration file not found, copying from example...")
        shutil.copy(env_example, env_file)
        print("✓ Created .env from example")
        return True
    else:
        print("! No configuration file found, using defaults")
        return True


def start_services():
    """Start both services in development mode."""
    processes = []
    env = {
        **os.environ,
        "BAKERY_API_URL": os.getenv("BAKERY_API_URL", f"http://localhost:{BAKERY_PORT}"),
    }

    try:
        print(f"\n🥐 Starting Mock Bakery on http://localhost:{BAKERY_PORT} ...")
        bakery_process = subprocess.Popen(
            [
                sys.executable, "-m", "uvicorn",
                "mock_bakery.main:app",
                "--reload",
                "--host", "0.0.0.0",
                "--port", str(BAKERY_PORT),
            ],
            cwd=PROJECT_ROOT,
            env=env,
        )
        processes.append(bakery_process)

        # Wait a bit for the bakery API to start
        time.sleep(2)

        print(f"🧾 Starting Pastry Front on http://localhost:{FRONT_PORT} ...")
        front_process = subprocess.Popen(
            [
                sys.executable, "-m", "uvicorn",
                "pastry_front.main:app",
                "--reload",
                "--host", "0.0.0.0",
                "--port", str(FRONT_PORT),
            ],
            cwd=PROJECT_ROOT,
            env=env,
        )
        processes.append(front_process)

        print("\n" + "=" * 60)
        print("Services started successfully!")
        print("=" * 60)
        print(f"\n📍 Front API:   http://localhost:{FRONT_PORT}/docs")
        print(f"📍 Bakery API:  http://localhost:{BAKERY_PORT}/docs")
        print("\nPress Ctrl+C to stop all services")
        print("=" * 60)

        for p in processes:
            p.wait()

    except KeyboardInterrupt:
        print("\n\nShutting down services...")
        for p in processes:
            p.terminate()
        for p in processes:
            p.wait()
        print("All services stopped.")


def main():
    print("=" * 60)
    print("Pastry Orders - Development Server")
    print("=" * 60)

    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    check_env()

    print("\n✓ All checks passed!")

    start_services()


if __name__ == "__main__":
    main()
